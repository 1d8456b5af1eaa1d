# -*- coding: utf-8 -*-
#
# Copyright (C) 2019 UCLouvain.
#
# OAI-PMH-Client is free software; you can redistribute it and/or
# modify it under the terms of the MIT License; see LICENSE file for more
# details.

"""Default values for the OAI-PMH command line client."""

OAIPMH_CLIENT_DEFAULT_URL = 'http://arXiv.org/oai2'
"""Demonstration repository endpoint."""

OAIPMH_CLIENT_DEFAULT_IDENTIFIER = 'oai:arXiv.org:cs/0112017'
"""Demonstration item identifier used by ``GetRecord``."""

OAIPMH_CLIENT_DEFAULT_METADATA_PREFIX = 'oai_dc'
"""Metadata format every OAI-PMH repository must support."""

OAIPMH_CLIENT_RESUMPTION_TOKEN_PATH = (
    'OAI-PMH', 'ListIdentifiers', 'resumptionToken')
"""Element path, from the document root, of a listing resumption token."""

OAIPMH_CLIENT_ALLOWED_SCHEMES = ('http', 'https')
"""URL schemes accepted for a repository endpoint."""

OAIPMH_CLIENT_LOG_FORMAT = '%(asctime)s %(message)s'
"""Format of the diagnostic lines written to standard error."""

OAIPMH_CLIENT_LOG_DATE_FORMAT = '%Y/%m/%d %H:%M:%S'
"""Timestamp format of the diagnostic lines."""
