# -*- coding: utf-8 -*-
#
# Copyright (C) 2019 UCLouvain.
#
# OAI-PMH-Client is free software; you can redistribute it and/or
# modify it under the terms of the MIT License; see LICENSE file for more
# details.

"""Pytest configuration."""

import pytest
import requests
from requests.utils import get_encoding_from_headers


def make_response(body, status_code=200, content_type='text/xml'):
    """Build a fully read :class:`requests.Response`."""
    response = requests.Response()
    response.status_code = status_code
    response.headers['Content-Type'] = content_type
    if not isinstance(body, bytes):
        body = body.encode('utf-8')
    response._content = body
    response._content_consumed = True
    response.encoding = get_encoding_from_headers(response.headers)
    return response


class FakeGet(object):
    """Replacement for ``requests.get`` recording requested URLs."""

    def __init__(self):
        """Initialize with an empty OAI-PMH document."""
        self.calls = []
        self.response = make_response('<OAI-PMH/>')
        self.error = None

    def reply(self, body, **kwargs):
        """Answer the next requests with ``body``."""
        self.response = make_response(body, **kwargs)

    def fail(self, error):
        """Raise ``error`` on the next requests."""
        self.error = error

    def __call__(self, url, **kwargs):
        """Record the call and answer it."""
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture()
def requests_get(monkeypatch):
    """Patch ``requests.get``."""
    fake = FakeGet()
    monkeypatch.setattr(requests, 'get', fake)
    return fake


@pytest.fixture()
def list_identifiers_page():
    """Namespaced ListIdentifiers page with a resumption token."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<OAI-PMH xmlns="http://www.openarchives.org/OAI/2.0/">'
        '<responseDate>2019-05-02T10:00:00Z</responseDate>'
        '<request verb="ListIdentifiers" metadataPrefix="oai_dc">'
        'http://example.org/oai2</request>'
        '<ListIdentifiers>'
        '<header><identifier>oai:example:1</identifier>'
        '<datestamp>2019-01-01</datestamp></header>'
        '<header><identifier>oai:example:2</identifier>'
        '<datestamp>2019-01-02</datestamp></header>'
        '<resumptionToken cursor="0" completeListSize="4">'
        'oai_dc/2/2</resumptionToken>'
        '</ListIdentifiers>'
        '</OAI-PMH>'
    )
