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
Image name formatting and parsing of registry table output
"""

import re
from typing import List, NamedTuple, Optional, Tuple

IMAGE_PREFIX = "ubuntu-core/custom"
IMAGE_NAME_PREFIX_PATTERN = IMAGE_PREFIX + "/ubuntu-{release}-snappy-core-{arch}-{channel}"
IMAGE_NAME_SUFFIX = "disk1.img"
HEADER_ID = "ID"


class VersionNumberError(ValueError):
    """Raised when a family image carries a non numeric version"""
    def __init__(self, name: str, version: str) -> None:
        super().__init__(
            "Invalid version number %r in image name %s" % (version, name))
        self.name = name
        self.version = version


class ImageRow(NamedTuple):
    """A single row of `image list` output"""
    id: str
    name: str


def image_name_prefix(release: str, channel: str, arch: str) -> str:
    """
    Name prefix shared by every version of an image family

    Args:
        release (str): release, e.g. `rolling` or `1504`
        channel (str): channel, e.g. `edge`, `stable`
        arch (str): architecture, e.g. `amd64`

    Returns:
        str: family prefix without trailing dash

    """
    return IMAGE_NAME_PREFIX_PATTERN.format(release=release, arch=arch, channel=channel)


def get_image_id(release: str, channel: str, arch: str, version: int) -> str:
    """Return image name of given family and version"""
    return "{}-{}-{}".format(
        image_name_prefix(release, channel, arch), version, IMAGE_NAME_SUFFIX)


def parse_image_table(output: str) -> List[ImageRow]:
    """
    Parse pipe delimited table printed by the registry cli.

    Border lines, blank lines and the header row are skipped.

    Args:
        output (str): stdout of `image list`

    Returns:
        list: ImageRow objects in table order

    """
    rows = []
    for line in output.splitlines():
        line = line.strip()
        if not line.startswith("|"):
            continue
        cells = [cell.strip() for cell in line.strip("|").split("|")]
        if len(cells) < 2:
            continue
        if cells[0] == HEADER_ID:
            continue
        rows.append(ImageRow(id=cells[0], name=cells[1]))
    return rows


def parse_version(name: str, release: str, channel: str, arch: str) -> Optional[int]:
    """
    Extract version number from an image name.

    Args:
        name (str): image name
        release (str): release
        channel (str): channel
        arch (str): arch

    Returns:
        int: version, or None if the image belongs to another family

    Raises:
        VersionNumberError: version part is not a non-negative integer

    """
    prefix = image_name_prefix(release, channel, arch) + "-"
    suffix = "-" + IMAGE_NAME_SUFFIX
    if not name.startswith(prefix) or not name.endswith(suffix):
        return None

    version = name[len(prefix):len(name) - len(suffix)]
    if not re.fullmatch(r"[0-9]+", version):
        raise VersionNumberError(name, version)
    return int(version)


def filter_versions(rows: List[ImageRow], release: str,
                    channel: str, arch: str) -> List[Tuple[int, str]]:
    """Return (version, name) pairs of the rows matching the family"""
    versions = []
    for row in rows:
        version = parse_version(row.name, release, channel, arch)
        if version is not None:
            versions.append((version, row.name))
    return versions
