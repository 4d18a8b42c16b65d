"""
Command line interface for dutree.

This module provides the ``du`` command: it builds a directory tree for
every operand and writes its disk usage report to stdout.
"""

import click

from .dirtree import build_tree
from .errors import ConflictingOptions
from .fs import OsFileSystem
from .options import DuOptions
from .report import format_tree
from .utils.formatting import OUT_FORMAT


@click.command(context_settings={"help_option_names": ["--help"]})
@click.version_option(package_name="dutree")
@click.option("-k", "kilo", is_flag=True, help="Write sizes in 1024-byte units instead of 512-byte units.")
@click.option("-a", "--all", "list_all", is_flag=True, help="Write counts for all files, not just directories.")
@click.option("-s", "--summarise", is_flag=True, help="Display only a total for each argument.")
@click.option("-L", "--dereference", "dereference_all", is_flag=True, help="Accepted for compatibility, has no effect.")
@click.option("-H", "--dereference-args", is_flag=True, help="Accepted for compatibility, has no effect.")
@click.option("-x", "--one-file-system", is_flag=True, help="Accepted for compatibility, has no effect.")
@click.argument("files", nargs=-1, type=click.Path())
@click.pass_context
def du(ctx, kilo, list_all, summarise, dereference_all, dereference_args, one_file_system, files):
    """Summarise disk usage of the set of FILEs, recursively for directories.

    Values are in 512-byte units, rounded up to the next unit, unless -k is
    given. With no FILE the current directory is used.
    """
    options = DuOptions.from_flags(
        kilo=kilo,
        list_all=list_all,
        summarise=summarise,
        dereference_all=dereference_all,
        dereference_args=dereference_args,
        one_file_system=one_file_system,
    )
    try:
        options.validate()
    except ConflictingOptions as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    fs = ctx.obj if ctx.obj is not None else OsFileSystem()
    for path in files or (".",):
        tree = build_tree(path, options.unit_size, fs=fs)
        for line in format_tree(tree, OUT_FORMAT, options.list_all, options.summarise):
            click.echo(line)
