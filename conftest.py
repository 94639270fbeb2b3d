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

"""Shared fixtures for cloudimg tests"""

import pytest

from cloudimg.commander import CliCommander


class FakeCliCommander:
    """Records executed commands and replays a canned output"""

    def __init__(self):
        self.calls = {}
        self.output = ""
        self.err = False

    def exec_command(self, *cmds):
        cmd_line = " ".join(cmds)
        self.calls[cmd_line] = self.calls.get(cmd_line, 0) + 1
        if self.err:
            raise CliCommander.CommandError(cmd_line, 1, "exec error")
        return self.output


@pytest.fixture
def commander():
    return FakeCliCommander()


BASE_TABLE = """+--------------------------------------+------------------------------------------------------------------------------------------------------+--------+
| ID                                   | Name                                                                                                 | Status |
+--------------------------------------+------------------------------------------------------------------------------------------------------+--------+
| 06c12690-08ef-4a9b-aaa6-6e8249bcfef8 | ubuntu-released/ubuntu-oneiric-11.10-amd64-server-20130509-disk1.img                                 | active |
| 8fa0213b-e598-473f-bb33-901281063395 | smoser-cloud-images/ubuntu-hardy-8.04-amd64-server-20121003                                          | active |
| 56e4a037-887f-4e8c-8e9f-edad2060232b | smoser-cloud-images/ubuntu-hardy-8.04-amd64-server-20121003-ramdisk                                  | active |
{0}
| f5eca345-3d7c-480d-a5de-3057ef1c5e82 | smoser-cloud-images/ubuntu-hardy-8.04-i386-server-20121003                                           | active |
| 47537aad-dcdb-422e-9302-2f874f88f216 | quantal-desktop-amd64                                                                                | active |
{1}
{2}
| f3618134-0151-48a2-8964-42574322fd52 | precise-desktop-amd64                                                                                | active |
| 762d5ce2-fbc2-4685-8d6c-71249d19df9e | ubuntu-core/devel/ubuntu-1504-snappy-core-amd64-edge-20151020-disk1.img                              | active |
| 3c1b7a10-6d5e-4f0e-9b7a-1f0a4e1c7a10 | ubuntu-core/custom/ubuntu-rolling-snappy-core-amd64-stable-500-disk1.img                             | active |
| 842949c6-225b-4ad0-81b7-98de2b818eed | smoser-lucid-loader/lucid-amd64-linux-image-2.6.32-34-virtual-v-2.6.32-34.77~smloader0-kernel        | active |
| bf412075-2c8d-4753-8d19-4e502cf57d8d | None                                                                                                 | active |
{3}
+--------------------------------------+------------------------------------------------------------------------------------------------------+--------+
"""

IMAGE_LINE = "| 762d5ce2-fbc2-4685-8d6c-71249d19df9e | " \
             "ubuntu-core/custom/ubuntu-{release}-snappy-core-{arch}-{channel}-{version}-disk1.img" \
             "                        | active |"


def image_line(version, release="rolling", channel="edge", arch="amd64"):
    """Table row of a family image"""
    return IMAGE_LINE.format(release=release, channel=channel, arch=arch, version=version)


@pytest.fixture
def registry_table():
    """Build `image list` output with up to four extra rows.

    Integers are turned into rolling/edge/amd64 image rows.
    """
    def _build(*lines):
        lines = [image_line(line) if isinstance(line, int) else line for line in lines]
        lines += [""] * (4 - len(lines))
        return BASE_TABLE.format(*lines)
    return _build
