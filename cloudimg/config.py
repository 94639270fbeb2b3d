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
Cloudimg Configuration Module
"""

import os
import logging
from typing import Union, Any

import toml

LOGGER = logging.getLogger('cloudimg.config')

DEFAULTS = {
    'CLI': 'openstack',
    'RELEASE': 'rolling',
    'CHANNEL': 'edge',
    'ARCH': 'amd64',
    'KEEP': 3,
    'LOG_LEVEL': 'WARNING',
    'LOG_FILE': None,
}


class Config:
    """Configuration object holds configuration parameters as
    class properties. It overrides default values by values from
    config toml file or environment."""

    def __init__(self, config_file=None):
        """construct config object"""
        self.conf = dict()

        if config_file:
            self.conf = self.load_from_file(config_file) or dict()

    def get_config_from_file(self, ckey=None):
        """get config from config.toml"""
        if ckey is None:
            return None

        keys = ckey.split('.')

        val = self.conf
        for key in keys:
            if not isinstance(val, dict) or key not in val:
                return None
            val = val[key]
        return val

    def get_config(self, ckey: str = '', ekey: str = '') -> Union[Any, object]:
        """
        Seek for config val through environment and config depending
        on given keys.

        One of the args `ckey`, `ekey` must be specified.

        Args:
            ckey: key in config file
            ekey: key in environment

        Returns:
            str, int: value

        """
        if not any([ckey, ekey]):
            return None

        for val in (os.getenv("CLOUDIMG_{}".format(ekey)) if ekey else None,
                    self.get_config_from_file(ckey)):
            if val is not None and val != '':
                return val
        return DEFAULTS.get(ekey, None)

    @staticmethod
    def load_from_file(config_file: str):
        """
        Load config values from given file
        Args:
            config_file (str): file path

        Returns:
            dict: parsed config, None on failure

        """
        try:
            with open(config_file, 'r') as cfile:
                return toml.load(cfile)
        except FileNotFoundError:
            LOGGER.error(
                "Could not found config file at location: %s",
                config_file)
        except toml.decoder.TomlDecodeError as err:
            LOGGER.error(
                "Could not load config toml file, "
                "please check your config file syntax. %s", err
            )
        return None

    @property
    def cli_binary(self):
        """
        Image registry command line tool. The default value is
        ``openstack``.

        config.toml: section ``cloud``, key ``cli``

        Environment variable: ``CLOUDIMG_CLI``

        """
        return self.get_config('cloud.cli', 'CLI')

    @property
    def release(self):
        """
        Default release of image family, ``rolling``.

        config.toml: section ``image``, key ``release``

        Environment variable: ``CLOUDIMG_RELEASE``

        """
        return str(self.get_config('image.release', 'RELEASE'))

    @property
    def channel(self):
        """
        Default channel of image family, ``edge``.

        config.toml: section ``image``, key ``channel``

        Environment variable: ``CLOUDIMG_CHANNEL``

        """
        return self.get_config('image.channel', 'CHANNEL')

    @property
    def arch(self):
        """
        Default architecture of image family, ``amd64``.

        config.toml: section ``image``, key ``arch``

        Environment variable: ``CLOUDIMG_ARCH``

        """
        return self.get_config('image.arch', 'ARCH')

    @property
    def keep(self) -> int:
        """
        Number of newest images preserved by ``purge``. The default
        value is ``3``.

        config.toml: section ``image``, key ``keep``

        Environment variable: ``CLOUDIMG_KEEP``

        """
        return int(self.get_config('image.keep', 'KEEP'))

    @property
    def log_level(self):
        """
        Logging level. The default value is ``WARNING``. Standard
        logging level strings of Python's logging module are valid.

        config.toml: section ``log``, key ``level``

        Environment variable: ``CLOUDIMG_LOG_LEVEL``

        """
        return self.get_config('log.level', 'LOG_LEVEL')

    @property
    def log_file(self):
        """
        A file path for storing logs. Logs go to stdout only by default.

        config.toml: section ``log``, key ``file``

        Environment variable: ``CLOUDIMG_LOG_FILE``

        """
        return self.get_config('log.file', 'LOG_FILE')

    def __call__(self, config_file=None):
        """
        Allow reinitialize instance with a new config file

        Args:
            config_file: config file path

        Returns:
            self: reinitialized instance

        """
        self.__init__(config_file)
        return self


config = Config() # pylint: disable=invalid-name
