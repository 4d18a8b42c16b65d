"""Diagnostic output for recoverable errors."""

import click

PROG_NAME = "du"


def echo_error(message):
    """Write a single diagnostic line to stderr."""
    click.echo(f"{PROG_NAME}: {message}", err=True)
