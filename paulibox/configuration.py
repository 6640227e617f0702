# Copyright 2026 Xanadu Quantum Technologies Inc.

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
r"""
This module contains the :class:`Configuration` class, holding the user options read
from a TOML file, such as the tolerance used when comparing closed symbolic phases.
"""

import os

import tomlkit
from appdirs import user_config_dir

_MISSING = {}


class Configuration:
    """Options loaded from a TOML file, addressed by dotted keys.

    The file is looked up, in order, in the current directory, the directory named by
    the ``PAULIBOX_CONF`` environment variable, and the user configuration directory.
    ``name`` may also be an absolute or relative path to the file. When no file is
    found the configuration starts empty.

    Args:
        name (str): filename of, or path to, the configuration file

    **Example**

    A ``config.toml`` file containing

    .. code-block:: toml

        [symbolic]
        tolerance = 1e-9

        [logging]
        max_argument_length = 120

    is read as

    >>> config = Configuration("config.toml")
    >>> config["symbolic.tolerance"]
    1e-09
    >>> config.get("architecture.grid.rows", 2)
    2
    """

    def __init__(self, name):
        self._name = name
        self._config = {}
        self._filepath = None

        for candidate in self.search_paths():
            if os.path.isfile(candidate):
                self.load(candidate)
                self._filepath = candidate
                break

    def search_paths(self):
        """Return the candidate locations of the configuration file, in lookup order."""
        directories = [
            os.curdir,
            os.environ.get("PAULIBOX_CONF", ""),
            user_config_dir("paulibox", "Xanadu"),
        ]
        paths = [os.path.join(d, self._name) for d in directories if d]
        paths.append(self._name)
        return paths

    def __str__(self):
        return f"{self._config}" if self._config else ""

    def __repr__(self):
        return f"paulibox Configuration <{self._filepath}>"

    def __bool__(self):
        return bool(self._config)

    @property
    def path(self):
        """str | None: the path of the loaded configuration file, if any"""
        return self._filepath

    def load(self, filepath):
        """Replace the stored options with those of a TOML file.

        Raises:
            FileNotFoundError: if ``filepath`` does not exist
        """
        with open(filepath, "r", encoding="utf8") as f:
            self._config = tomlkit.load(f).unwrap()

    def save(self, filepath):
        """Write the stored options to ``filepath`` as TOML."""
        with open(filepath, "w", encoding="utf8") as f:
            tomlkit.dump(self._config, f)

    def get(self, key, default=None):
        """Return the option stored under the dotted ``key``, or ``default`` when
        any part of the key is missing."""
        value = self[key]
        return default if value == _MISSING else value

    def __getitem__(self, key):
        """An empty ``dict`` is returned for keys that are not set."""
        node = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return {}
            node = node[part]
        return node

    def __setitem__(self, key, value):
        """Intermediate tables are created as needed."""
        *parents, leaf = key.split(".")
        node = self._config
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value
