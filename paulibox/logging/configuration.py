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
"""
Loading of the packaged logging configuration and the ``TRACE`` level.
"""
import logging
import logging.config
import os

import tomlkit

# Below DEBUG; used for dumps of intermediate synthesis state.
TRACE = logging.DEBUG // 2


def _trace(self, message, *args, **kwargs):
    """Log ``message`` at the ``TRACE`` level."""
    # pylint: disable=protected-access
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


def _register_trace_level():
    logging.addLevelName(TRACE, "TRACE")
    logging.TRACE = TRACE
    logging.getLoggerClass().trace = _trace


def config_path():
    """Absolute path of the ``log_config.toml`` file shipped with paulibox.

    **Example**

    >>> config_path()
    '/home/user/venv/lib/python3.12/site-packages/paulibox/logging/log_config.toml'
    """
    return os.path.join(os.path.dirname(__file__), "log_config.toml")


def enable_logging(level=None):
    """Configure the paulibox loggers from ``log_config.toml``.

    Any logging configuration set up earlier for the loggers named in the file is
    replaced.

    Args:
        level (int | str | None): if given, overrides the level of the ``paulibox`` logger
            set by the file, e.g. ``"TRACE"`` to include intermediate synthesis state

    **Example**

    >>> paulibox.logging.enable_logging()
    """
    _register_trace_level()
    with open(config_path(), "r", encoding="utf8") as f:
        logging.config.dictConfig(tomlkit.load(f).unwrap())
    if level is not None:
        logging.getLogger("paulibox").setLevel(level)
