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

"""
Client for image registry operations
"""

import logging
from typing import List

from cloudimg import CloudimgError
from cloudimg.commander import CliCommander
from cloudimg.image_name import ImageRow, get_image_id, parse_image_table, filter_versions

DEFAULT_CLI = "openstack"
ERR_VERSION_NOT_FOUND_PATTERN = \
    "No image version found for release {}, channel {} and arch {}"


class Client:
    """ Image registry client

    Every registry call is delegated to a commander, an object with an
    `exec_command(*cmds)` method returning the command output.
    """

    Error = CloudimgError

    class VersionNotFound(Error):
        """No image of the requested family exists"""
        def __init__(self, release: str, channel: str, arch: str) -> None:
            super().__init__(ERR_VERSION_NOT_FOUND_PATTERN.format(release, channel, arch))
            self.release = release
            self.channel = channel
            self.arch = arch

    def __init__(self, commander: CliCommander = None, cli_binary: str = DEFAULT_CLI) -> None:
        """
        Initialization method for client
        Args:
            commander (CliCommander): command runner (optional)
            cli_binary (str): registry cli executable (optional)
        """
        self.commander = commander or CliCommander()
        self.cli_binary = cli_binary
        self.logger = logging.getLogger('cloudimg.client')

    def run(self, *args: str) -> str:
        """Run a registry cli subcommand"""
        return self.commander.exec_command(self.cli_binary, *args)

    def list_images(self) -> List[ImageRow]:
        """List active images of the registry"""
        output = self.run("image", "list", "--property", "status=active")
        return parse_image_table(output)

    def get_latest_version(self, release: str, channel: str, arch: str) -> int:
        """
        Find the latest version of an image family.

        Args:
            release (str): release
            channel (str): channel
            arch (str): arch

        Returns:
            int: greatest version in the registry

        Raises:
            Client.VersionNotFound: there is no image of the family
            VersionNumberError: a family image has a malformed version

        """
        versions = filter_versions(self.list_images(), release, channel, arch)
        if not versions:
            raise Client.VersionNotFound(release, channel, arch)

        latest = max(version for version, _ in versions)
        self.logger.debug("Latest version of %s/%s/%s is %d", release, channel, arch, latest)
        return latest

    def get_versions(self, release: str, channel: str, arch: str) -> List[str]:
        """Return image names of the family, newest first"""
        versions = filter_versions(self.list_images(), release, channel, arch)
        versions.sort(key=lambda item: item[0], reverse=True)
        return [name for _, name in versions]

    # pylint: disable-msg=too-many-arguments
    def create(self, path: str, release: str, channel: str, arch: str, version: int) -> None:
        """Upload the image file at path as a new version of the family"""
        if version < 0:
            raise ValueError("Version must be a non-negative integer, got %d" % version)

        name = get_image_id(release, channel, arch, version)
        self.logger.info("Creating image %s from %s", name, path)
        self.run("image", "create", "--file", path, name)

    def delete(self, *images: str) -> None:
        """Delete images by name"""
        if not images:
            self.logger.debug("No images to delete")
            return

        self.logger.info("Deleting images: %s", ", ".join(images))
        self.run("image", "delete", *images)

    def purge(self, release: str, channel: str, arch: str, keep: int) -> List[str]:
        """
        Delete old images of a family.

        Args:
            release (str): release
            channel (str): channel
            arch (str): arch
            keep (int): number of newest images to preserve

        Returns:
            list: names of deleted images

        """
        if keep < 0:
            raise ValueError("Number of images to keep can not be negative")

        outdated = self.get_versions(release, channel, arch)[keep:]
        self.delete(*outdated)
        return outdated

    def publish(self, path: str, release: str, channel: str, arch: str, version: int) -> bool:
        """
        Create image only if version is newer than the latest one in registry.

        Returns:
            bool: whether the image was created

        """
        if version < 0:
            raise ValueError("Version must be a non-negative integer, got %d" % version)

        try:
            latest = self.get_latest_version(release, channel, arch)
        except Client.VersionNotFound:
            latest = -1

        if version <= latest:
            self.logger.info("Version %d is not newer than %d, skipping", version, latest)
            return False

        self.create(path, release, channel, arch, version)
        return True
    # pylint: enable-msg=too-many-arguments
