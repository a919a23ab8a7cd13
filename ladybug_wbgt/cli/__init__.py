"""ladybug-wbgt commands."""
import click

from ladybug.cli import main
from .mtx import mtx


# command group for all wbgt extension commands.
@click.group(help='ladybug wbgt commands.')
@click.version_option()
def wbgt():
    pass


# add sub-groups for wbgt
wbgt.add_command(mtx)


# add wbgt sub-group to ladybug CLI
main.add_command(wbgt)
