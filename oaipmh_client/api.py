# -*- coding: utf-8 -*-
#
# Copyright (C) 2019 UCLouvain.
#
# OAI-PMH-Client is free software; you can redistribute it and/or
# modify it under the terms of the MIT License; see LICENSE file for more
# details.

"""API for querying OAI-PMH repositories."""

import logging

from urllib.parse import SplitResult, urlencode, urlsplit, urlunsplit

import requests

from .config import OAIPMH_CLIENT_ALLOWED_SCHEMES
from .errors import InvalidURLError, MalformedResponseError, TransportError
from .utils import lookup_resumption_token

log = logging.getLogger(__name__)


def parse_endpoint(value):
    """Parse a repository endpoint URL.

    Query string and fragment are dropped, every request builds its own.

    :param value: URL string given by the user.
    :returns: A :class:`urllib.parse.SplitResult`.
    :raises InvalidURLError: if ``value`` is not an absolute HTTP URL.
    """
    if value is None or not value.strip():
        raise InvalidURLError('Empty repository URL.')
    if any(char.isspace() for char in value):
        raise InvalidURLError(
            'Invalid repository URL {url!r}: contains whitespace.'.format(
                url=value))
    try:
        url = urlsplit(value)
        # hostname and port are validated lazily by urllib
        url.port
    except ValueError as e:
        raise InvalidURLError(
            'Invalid repository URL {url!r}: {e}'.format(url=value, e=e))
    if url.scheme.lower() not in OAIPMH_CLIENT_ALLOWED_SCHEMES:
        raise InvalidURLError(
            'Invalid repository URL {url!r}: unsupported scheme.'.format(
                url=value))
    if not url.hostname:
        raise InvalidURLError(
            'Invalid repository URL {url!r}: missing host.'.format(
                url=value))
    return url._replace(query='', fragment='')


def build_url(endpoint, parameters):
    """Attach an encoded query string to an endpoint.

    Parameters are sorted by name.

    :param endpoint: A :class:`urllib.parse.SplitResult`.
    :param parameters: Mapping of parameter name to value.
    :returns: The full request URL as a string.
    """
    query = urlencode(sorted(parameters.items()))
    return urlunsplit(endpoint._replace(query=query, fragment=''))


def get_record_parameters(identifier, metadata_prefix):
    """Parameters of a ``GetRecord`` request."""
    return {
        'verb': 'GetRecord',
        'identifier': identifier or '',
        'metadataPrefix': metadata_prefix or '',
    }


def identify_parameters():
    """Parameters of an ``Identify`` request."""
    return {'verb': 'Identify'}


def list_identifiers_parameters(from_=None, until=None, metadata_prefix=None,
                                set_=None, resumption_token=None):
    """Parameters of a ``ListIdentifiers`` request.

    A resumption token is an exclusive argument: when given, the selective
    harvesting arguments are left out.
    """
    parameters = {'verb': 'ListIdentifiers'}
    if resumption_token:
        parameters['resumptionToken'] = resumption_token
        return parameters
    optional = (
        ('from', from_),
        ('until', until),
        ('set', set_),
        ('metadataPrefix', metadata_prefix),
    )
    for name, value in optional:
        if value:
            parameters[name] = value
    return parameters


def get(url, logger=None):
    """Issue a GET request and read the whole response.

    No timeout is set, an unresponsive server blocks the caller.

    :param url: Fully qualified URL, query string included.
    :param logger: Logger receiving the request URL. (Default: module logger)
    :returns: The :class:`requests.Response`, its body already read.
    :raises TransportError: if the request or the body read fails.
    """
    logger = logger or log
    logger.info(url)
    try:
        with requests.get(url) as response:
            response.content
            return response
    except requests.exceptions.RequestException as e:
        raise TransportError(
            'Request to {url} failed: {e}'.format(url=url, e=e)) from e


def response_text(response):
    """Decode a response body, UTF-8 unless a charset is announced."""
    content_type = response.headers.get('Content-Type', '')
    if 'charset' not in content_type.lower():
        response.encoding = 'utf-8'
    return response.text


def response_body(response, raw=False):
    """Response body as bytes when ``raw`` is set, as text otherwise."""
    if raw:
        return response.content
    return response_text(response)


def fetch(url, logger=None, raw=False):
    """Get the body of a URL.

    The body is returned whatever the HTTP status code.

    :param url: Fully qualified URL, query string included.
    :param logger: Logger receiving the request URL. (Default: module logger)
    :param raw: Return the body bytes untouched instead of text.
    :raises TransportError: if the request or the body read fails.
    """
    return response_body(get(url, logger=logger), raw=raw)


class Repository(object):
    """OAI-PMH repository reachable at a base endpoint.

    Every verb returns the response body as text, or as the bytes sent by
    the repository when called with ``raw=True``.
    """

    def __init__(self, url, logger=None):
        """Initialize repository.

        :param url: Endpoint as a string or a
            :class:`urllib.parse.SplitResult`.
        :param logger: Logger for diagnostics. (Default: module logger)
        """
        if not isinstance(url, SplitResult):
            url = parse_endpoint(url)
        self._url = url._replace(query='', fragment='')
        self.logger = logger or log

    @classmethod
    def from_url(cls, value, logger=None):
        """Create a repository from a user supplied URL string."""
        return cls(parse_endpoint(value), logger=logger)

    @property
    def url(self):
        """Base endpoint.

        :returns: A :class:`urllib.parse.SplitResult` without query.
        """
        return self._url

    def send(self, parameters):
        """Issue a request with the given parameters.

        :param parameters: Mapping of OAI-PMH arguments.
        :returns: The :class:`requests.Response`.
        """
        return get(build_url(self._url, parameters), logger=self.logger)

    def request(self, parameters, raw=False):
        """Issue a request and return its body."""
        return response_body(self.send(parameters), raw=raw)

    def get_record(self, identifier, metadata_prefix, raw=False):
        """Get a single record.

        :param identifier: Unique identifier of the item.
        :param metadata_prefix: Metadata format of the record.
        """
        return self.request(get_record_parameters(identifier,
                                                  metadata_prefix), raw=raw)

    def identify(self, raw=False):
        """Retrieve information about the repository."""
        return self.request(identify_parameters(), raw=raw)

    def list_identifiers(self, from_=None, until=None, metadata_prefix=None,
                         set_=None, resumption_token=None, raw=False):
        """Retrieve one page of item identifiers.

        The resumption token of the page is logged, it is never requested
        automatically.

        :raises MalformedResponseError: if the page is not well-formed XML.
        """
        response = self.send(list_identifiers_parameters(
            from_=from_,
            until=until,
            metadata_prefix=metadata_prefix,
            set_=set_,
            resumption_token=resumption_token))
        body = response_body(response, raw=raw)
        # the document declares its own encoding
        lookup = lookup_resumption_token(response.content)
        if lookup.malformed:
            raise MalformedResponseError(lookup.error, body=body)
        self.logger.info(lookup.token)
        return body

    def __repr__(self):
        """Representation of the repository."""
        return '<Repository {url}>'.format(url=urlunsplit(self._url))
