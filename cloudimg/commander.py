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
Runs the external image registry command line tool
"""

import os
import logging
import subprocess

from cloudimg import CloudimgError


class CliCommander:
    """Executes cli commands and returns their output"""

    class CommandError(CloudimgError):
        """Command exited with non-zero status"""
        def __init__(self, cmd: str, code: int, stderr: str = '') -> None:
            super().__init__("Command `{}` failed with exit code {}: {}".format(
                cmd, code, stderr.strip()))
            self.cmd = cmd
            self.code = code
            self.stderr = stderr

    def __init__(self) -> None:
        self.logger = logging.getLogger('cloudimg.commander')

    def exec_command(self, *cmds: str) -> str:
        """
        Run a command and capture its output.

        Args:
            *cmds: argument vector, e.g. ('openstack', 'image', 'list')

        Returns:
            str: stdout of command

        Raises:
            CliCommander.CommandError: command could not be run or failed

        """
        cmd_line = " ".join(cmds)
        self.logger.debug("Running: %s", cmd_line)

        try:
            process = subprocess.run(list(cmds), env=os.environ,
                                     stdout=subprocess.PIPE,
                                     stderr=subprocess.PIPE,
                                     universal_newlines=True)
        except OSError as err:
            code = 127 if isinstance(err, FileNotFoundError) else 126
            raise CliCommander.CommandError(cmd_line, code, str(err))

        if process.returncode != 0:
            self.logger.debug("Command failed (%d): %s", process.returncode, process.stderr)
            raise CliCommander.CommandError(cmd_line, process.returncode, process.stderr)

        return process.stdout
