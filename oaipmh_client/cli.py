# -*- coding: utf-8 -*-
#
# Copyright (C) 2019 UCLouvain.
#
# OAI-PMH-Client is free software; you can redistribute it and/or
# modify it under the terms of the MIT License; see LICENSE file for more
# details.

"""CLI for OAI-PMH Client."""

import logging

import click

from .api import Repository
from .config import OAIPMH_CLIENT_DEFAULT_IDENTIFIER, \
    OAIPMH_CLIENT_DEFAULT_METADATA_PREFIX, OAIPMH_CLIENT_DEFAULT_URL, \
    OAIPMH_CLIENT_LOG_DATE_FORMAT, OAIPMH_CLIENT_LOG_FORMAT
from .errors import InvalidURLError, MalformedResponseError, TransportError
from .version import __version__

logger = logging.getLogger('oaipmh_client')


class ClickEchoHandler(logging.Handler):
    """Logging handler writing records to standard error with click."""

    def emit(self, record):
        """Write a formatted record."""
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(level=logging.INFO):
    """Attach the standard error handler to the package logger."""
    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(
            OAIPMH_CLIENT_LOG_FORMAT, OAIPMH_CLIENT_LOG_DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)


def fail(ctx, message):
    """Report an error and exit with status 1."""
    click.secho('Error: {message}'.format(message=message), fg='red',
                err=True)
    ctx.exit(1)


def open_repository(ctx, url):
    """Create the repository or exit if the URL is invalid."""
    try:
        return Repository.from_url(url, logger=logger)
    except InvalidURLError as e:
        fail(ctx, e)


class AliasedGroup(click.Group):
    """Group resolving commands by their name or their short alias."""

    def __init__(self, *args, **kwargs):
        """Initialize group."""
        super(AliasedGroup, self).__init__(*args, **kwargs)
        self.aliases = {}

    def get_command(self, ctx, cmd_name):
        """Return the command registered under a name or an alias."""
        return super(AliasedGroup, self).get_command(
            ctx, self.aliases.get(cmd_name, cmd_name))

    def command(self, *args, **kwargs):
        """Register a command, with an optional ``alias`` keyword."""
        alias = kwargs.pop('alias', None)
        decorator = super(AliasedGroup, self).command(*args, **kwargs)

        def register(f):
            cmd = decorator(f)
            if alias:
                self.aliases[alias] = cmd.name
            return cmd
        return register

    def format_commands(self, ctx, formatter):
        """List commands together with their alias."""
        shortcuts = {name: alias for alias, name in self.aliases.items()}
        rows = []
        for name in self.list_commands(ctx):
            cmd = super(AliasedGroup, self).get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            label = name
            if name in shortcuts:
                label = '{name}, {alias}'.format(name=name,
                                                 alias=shortcuts[name])
            rows.append((label, cmd.get_short_help_str()))
        if rows:
            with formatter.section('Commands'):
                formatter.write_dl(rows)


@click.group(cls=AliasedGroup)
@click.version_option(__version__, prog_name='oaipmh')
@click.option('-q', '--quiet', is_flag=True, default=False,
              help='Only report errors on standard error.')
def oaipmh(quiet):
    """OAI command line client."""
    setup_logging(logging.WARNING if quiet else logging.INFO)


url_option = click.option('-u', '--url', default=OAIPMH_CLIENT_DEFAULT_URL,
                          show_default=True, help='repository URL')
prefix_option = click.option('-p', '--prefix',
                             default=OAIPMH_CLIENT_DEFAULT_METADATA_PREFIX,
                             show_default=True, help='metadataPrefix')


@oaipmh.command('GetRecord', alias='get')
@url_option
@click.option('-i', '--id', 'identifier',
              default=OAIPMH_CLIENT_DEFAULT_IDENTIFIER, show_default=True,
              help='identifier')
@prefix_option
@click.pass_context
def get_record(ctx, url, identifier, prefix):
    """Get a single record from the repository."""
    repository = open_repository(ctx, url)
    try:
        result = repository.get_record(identifier, prefix, raw=True)
    except TransportError as e:
        fail(ctx, e)
    click.echo(result, nl=False)


@oaipmh.command('Identify', alias='id')
@url_option
@click.pass_context
def identify(ctx, url):
    """Retrieve information about a repository."""
    repository = open_repository(ctx, url)
    try:
        result = repository.identify(raw=True)
    except TransportError as e:
        fail(ctx, e)
    click.echo(result, nl=False)


@oaipmh.command('ListIdentifiers', alias='ls')
@url_option
@click.option('-f', '--from', 'from_', default='', help='earliest date')
@click.option('-t', '--until', default='', help='latest date')
@prefix_option
@click.option('-r', '--token', default='', help='resumptionToken')
@click.option('-s', '--set', 'set_', default='', help='set name')
@click.pass_context
def list_identifiers(ctx, url, from_, until, prefix, token, set_):
    """Retrieve the identifiers from a repository."""
    repository = open_repository(ctx, url)
    try:
        result = repository.list_identifiers(
            from_=from_,
            until=until,
            metadata_prefix=prefix,
            set_=set_,
            resumption_token=token,
            raw=True)
    except TransportError as e:
        fail(ctx, e)
    except MalformedResponseError as e:
        # a page that cannot be paginated stops the harvest
        logger.critical('Malformed response: {e}'.format(e=e))
        ctx.exit(1)
    click.echo(result, nl=False)
