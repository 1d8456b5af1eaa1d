# -*- coding: utf-8 -*-
#
# Copyright (C) 2019 UCLouvain.
#
# OAI-PMH-Client is free software; you can redistribute it and/or
# modify it under the terms of the MIT License; see LICENSE file for more
# details.

"""Version information for OAI-PMH-Client.

This file is imported by ``oaipmh_client.__init__``,
and read by ``pyproject.toml``.
"""

__version__ = '0.1.0'
