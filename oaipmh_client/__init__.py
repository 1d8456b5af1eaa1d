# -*- coding: utf-8 -*-
#
# Copyright (C) 2019 UCLouvain.
#
# OAI-PMH-Client is free software; you can redistribute it and/or
# modify it under the terms of the MIT License; see LICENSE file for more
# details.

"""Command line client for OAI-PMH repositories."""

from .api import Repository, fetch
from .errors import InvalidURLError, MalformedResponseError, \
    OAIClientError, TransportError
from .utils import extract_resumption_token, lookup_resumption_token
from .version import __version__

__all__ = ('__version__', 'Repository', 'fetch', 'extract_resumption_token',
           'lookup_resumption_token', 'OAIClientError', 'InvalidURLError',
           'TransportError', 'MalformedResponseError')
