# Cloudimg Cloud Image Registry Client
# Copyright (C) 2019  Rainlab Inc & Creationline, Inc & Beiran Contributors
#
# Rainlab Inc. https://rainlab.co.jp
# Creationline, Inc. https://creationline.com">
# Beiran Contributors https://docs.beiran.io/contributors.html
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""command line client for rotating images in a cloud image registry"""

import logging
from typing import Optional

import click
from tabulate import tabulate

from cloudimg import CloudimgError
from cloudimg.client import Client
from cloudimg.commander import CliCommander
from cloudimg.config import config
from cloudimg.image_name import parse_version
from cloudimg.log import build_logger
from cloudimg.version import get_version

# pylint: disable=invalid-name
logger = logging.getLogger('cloudimg')


class CloudimgContext:
    """Context object for cloudimg commands which keeps the registry client and config"""

    def __init__(self, commander: CliCommander = None) -> None:
        self.config = config
        self.client = Client(commander=commander, cli_binary=config.cli_binary)

    def family(self, release: Optional[str], channel: Optional[str],
               arch: Optional[str]) -> tuple:
        """Fill missing filter values from config"""
        return (release or self.config.release,
                channel or self.config.channel,
                arch or self.config.arch)


# pylint: disable=invalid-name
pass_context = click.make_pass_decorator(CloudimgContext, ensure=True)


class CloudimgCLI(click.Group):
    """CloudimgCLI reports registry and parse errors instead of tracebacks"""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except (CloudimgError, ValueError) as err:
            logger.debug("Command failed", exc_info=True)
            click.echo('\nError! Details are below,'
                       ' check your command again: \n\n{}\n'.format(err), err=True)
            ctx.exit(1)


def family_options(func):
    """Add --release, --channel and --arch options to a command"""
    func = click.option('--arch', default=None,
                        help='Image architecture, e.g. amd64')(func)
    func = click.option('--channel', default=None,
                        help='Image channel, e.g. edge, stable')(func)
    func = click.option('--release', default=None,
                        help='Image release, e.g. rolling, 1504')(func)
    return func


@click.group(cls=CloudimgCLI, invoke_without_command=True, no_args_is_help=True)
@click.option('--debug', is_flag=True, default=False, help='Enable debug logs.')
@click.option('--config', "config_file", default=None, required=False,
              type=click.Path(dir_okay=False),
              help="Path to a cloudimg config file. It must be a TOML file.")
def main(debug: bool = False, config_file: str = None):
    """Manage snappy images in a cloud image registry

    Please use --help option with commands to get their detailed usage.

    \b
    cloudimg --help
    cloudimg versions --release rolling --channel edge --arch amd64
    cloudimg purge --keep 3

    If you need, specify --config before everything:

    cloudimg --config /path/to/config.toml sub-command args options

    """
    if config_file:
        config(config_file=config_file)

    log_level = logging.DEBUG if debug else config.log_level
    build_logger(config.log_file, log_level)
    logger.debug("set log level to %s", log_level)


@main.command('list')
@pass_context
def image_list(ctx):
    """List active images of the registry"""
    images = ctx.client.list_images()
    table = [[image.id, image.name] for image in images]
    click.echo(tabulate(table, headers=["ID", "Name"]))


@main.command('latest')
@family_options
@pass_context
def image_latest(ctx, release: str, channel: str, arch: str):
    """Print the latest version of an image family"""
    version = ctx.client.get_latest_version(*ctx.family(release, channel, arch))
    click.echo(version)


@main.command('versions')
@family_options
@pass_context
def image_versions(ctx, release: str, channel: str, arch: str):
    """List images of a family, newest first"""
    family = ctx.family(release, channel, arch)
    names = ctx.client.get_versions(*family)
    table = [[parse_version(name, *family), name] for name in names]
    click.echo(tabulate(table, headers=["Version", "Name"]))


@main.command('create')
@click.option('--version', 'version', type=click.IntRange(min=0), required=True,
              help='Version number of new image')
@family_options
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@pass_context
# pylint: disable-msg=too-many-arguments
def image_create(ctx, version: int, release: str, channel: str, arch: str, path: str):
    """Upload image file as a new version of the family"""
    ctx.client.create(path, *ctx.family(release, channel, arch), version)
    click.echo("Image version %d is created" % version)


@main.command('publish')
@click.option('--version', 'version', type=click.IntRange(min=0), required=True,
              help='Version number of new image')
@family_options
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@pass_context
def image_publish(ctx, version: int, release: str, channel: str, arch: str, path: str):
    """Upload image file only if the version is newer than the latest one"""
    if ctx.client.publish(path, *ctx.family(release, channel, arch), version):
        click.echo("Image version %d is published" % version)
    else:
        click.echo("Image version %d is not newer than the latest one, skipped" % version)
# pylint: enable-msg=too-many-arguments


@main.command('delete')
@click.argument('images', nargs=-1, required=True)
@pass_context
def image_delete(ctx, images: tuple):
    """Delete images by name"""
    ctx.client.delete(*images)
    click.echo("%d image(s) deleted" % len(images))


@main.command('purge')
@click.option('--keep', type=click.IntRange(min=0), default=None,
              help='Number of newest images to preserve (default from config)')
@family_options
@pass_context
def image_purge(ctx, keep: int, release: str, channel: str, arch: str):
    """Delete all but the newest images of a family"""
    if keep is None:
        keep = ctx.config.keep
    deleted = ctx.client.purge(*ctx.family(release, channel, arch), keep)
    for name in deleted:
        click.echo("Deleted %s" % name)
    if not deleted:
        click.echo("Nothing to delete")


@main.command('version')
def version_command():
    """Print cloudimg version"""
    click.echo("cloudimg %s" % get_version())
