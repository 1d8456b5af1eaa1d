# -*- coding: utf-8 -*-
#
# Copyright (C) 2019 UCLouvain.
#
# OAI-PMH-Client is free software; you can redistribute it and/or
# modify it under the terms of the MIT License; see LICENSE file for more
# details.

"""Utility functions for OAI-PMH response processing."""

from collections import namedtuple

from lxml import etree

from .config import OAIPMH_CLIENT_RESUMPTION_TOKEN_PATH
from .errors import MalformedResponseError

XMLParser = etree.XMLParser(resolve_entities=False, no_network=True)

TextXMLParser = etree.XMLParser(resolve_entities=False, no_network=True,
                                encoding='utf-8')
"""Parser of decoded text, ignoring the encoding declared by the document."""

FOUND = 'found'
NOT_FOUND = 'not_found'
PARSE_ERROR = 'parse_error'


class ResumptionTokenLookup(namedtuple('ResumptionTokenLookup',
                                       ['status', 'token', 'error'])):
    """Outcome of a resumption token lookup.

    ``status`` is one of ``found``, ``not_found`` or ``parse_error``;
    ``token`` is the empty string unless the token was found and ``error``
    holds the parser message of a ``parse_error``.
    """

    __slots__ = ()

    @property
    def found(self):
        """Token element exists and has text content."""
        return self.status == FOUND

    @property
    def malformed(self):
        """Document was not well-formed XML."""
        return self.status == PARSE_ERROR


def path_to_xpath(path):
    """Build an absolute XPath matching element local names.

    :param path: Sequence of element names starting at the document root.
    :returns: XPath expression string.
    """
    return ''.join(
        "/*[local-name()='{name}']".format(name=name) for name in path)


RESUMPTION_TOKEN_XPATH = etree.XPath(
    path_to_xpath(OAIPMH_CLIENT_RESUMPTION_TOKEN_PATH))


def parse_xml(text):
    """Parse an XML document into an element tree.

    Bytes are decoded as the document declares, text is taken as is.

    :param text: XML document as bytes or text.
    :returns: The root element.
    :raises MalformedResponseError: if ``text`` is not well-formed.
    """
    try:
        if isinstance(text, bytes):
            return etree.fromstring(text, parser=XMLParser)
        return etree.fromstring(text.encode('utf-8'), parser=TextXMLParser)
    except etree.XMLSyntaxError as e:
        raise MalformedResponseError(str(e) or 'empty document', body=text)


def lookup_resumption_token(text):
    """Look up the ``ListIdentifiers`` resumption token of a response.

    :param text: OAI-PMH response body, bytes or text. A blank body has
        no token.
    :returns: A :class:`ResumptionTokenLookup`.
    """
    if not text.strip():
        return ResumptionTokenLookup(NOT_FOUND, '', None)
    try:
        root = parse_xml(text)
    except MalformedResponseError as e:
        return ResumptionTokenLookup(PARSE_ERROR, '', str(e))
    for element in RESUMPTION_TOKEN_XPATH(root):
        token = ''.join(element.itertext())
        if token:
            return ResumptionTokenLookup(FOUND, token, None)
        break
    return ResumptionTokenLookup(NOT_FOUND, '', None)


def extract_resumption_token(text):
    """Return the resumption token of a response or an empty string.

    :param text: OAI-PMH response body, bytes or text.
    :raises MalformedResponseError: if ``text`` is not well-formed XML.
    """
    lookup = lookup_resumption_token(text)
    if lookup.malformed:
        raise MalformedResponseError(lookup.error, body=text)
    return lookup.token
