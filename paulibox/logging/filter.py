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
"""Record filters named in ``log_config.toml`` under ``[filters]``."""
import logging
import os


# pylint: disable=too-few-public-methods
class LocalProcessFilter(logging.Filter):
    """Keeps only records emitted by the process that created the filter."""

    def __init__(self):
        super().__init__()
        self.pid = os.getpid()

    def filter(self, record):
        return record.process == self.pid


class MaxLevelFilter(logging.Filter):
    """Keeps records whose level does not exceed ``level``.

    Args:
        level (int | str): the highest level let through, as a number or a level name
    """

    def __init__(self, level=logging.DEBUG):
        super().__init__()
        self.level = logging.getLevelName(level) if isinstance(level, str) else level

    def filter(self, record):
        return record.levelno <= self.level


class DebugOnlyFilter(MaxLevelFilter):
    """Keeps ``DEBUG`` and ``TRACE`` records, dropping everything from ``INFO`` up."""

    def __init__(self):
        super().__init__(logging.DEBUG)
