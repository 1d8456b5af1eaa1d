# -*- coding: utf-8 -*-
#
# Copyright (C) 2019 UCLouvain.
#
# OAI-PMH-Client is free software; you can redistribute it and/or
# modify it under the terms of the MIT License; see LICENSE file for more
# details.

"""Errors raised by the OAI-PMH client."""


class OAIClientError(Exception):
    """Base class for errors raised by the OAI-PMH client."""


class InvalidURLError(OAIClientError, ValueError):
    """The repository endpoint is not a usable URL."""


class TransportError(OAIClientError):
    """The repository could not be reached or its response not read."""


class MalformedResponseError(OAIClientError):
    """The repository response is not well-formed XML.

    :param message: The parser error message.
    :param body: The raw response text, if any.
    """

    def __init__(self, message, body=None):
        """Initialize error."""
        super(MalformedResponseError, self).__init__(message)
        self.body = body
