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
Unit tests for the :mod:`paulibox.logging` configuration and decorators.
"""
import logging
import os

import pytest

import paulibox as pb

from paulibox.circuit import PauliExpBox
from paulibox.logging import (
    TRACE,
    DebugOnlyFilter,
    LocalProcessFilter,
    MaxLevelFilter,
    config_path,
    debug_logger,
    debug_logger_init,
    enable_logging,
    format_call,
)
from paulibox.pauli import PauliTensor
from paulibox.synthesis import pauli_gadget


@debug_logger
def _add(x, y=2):
    return x + y


class _Thing:
    @debug_logger_init
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"_Thing({self.value})"


@pytest.fixture(name="reset_paulibox_logger")
def reset_paulibox_logger_fixture():
    """Undo the logger changes made by ``enable_logging``."""
    yield
    for name in ("paulibox", "networkx"):
        lgr = logging.getLogger(name)
        lgr.handlers.clear()
        lgr.setLevel(logging.NOTSET)
        lgr.propagate = True


class TestLogConfiguration:
    """Tests for loading the logging configuration file."""

    def test_config_path(self):
        """Test that the configuration file ships with the package."""
        path = config_path()
        assert os.path.basename(path) == "log_config.toml"
        assert os.path.isfile(path)

    @pytest.mark.usefixtures("reset_paulibox_logger")
    def test_enable_logging(self):
        """Test that enabling logging configures the package logger and the TRACE level."""
        enable_logging()

        lgr = logging.getLogger("paulibox")
        assert lgr.level == logging.DEBUG
        assert not lgr.propagate
        assert lgr.handlers
        assert logging.getLevelName(TRACE) == "TRACE"
        assert hasattr(lgr, "trace")

    @pytest.mark.usefixtures("reset_paulibox_logger")
    def test_enable_logging_level_override(self):
        """Test that a level passed to ``enable_logging`` replaces the configured one."""
        enable_logging(level="TRACE")
        lgr = logging.getLogger("paulibox")
        assert lgr.level == TRACE
        assert lgr.isEnabledFor(TRACE)

    def test_trace_below_debug(self):
        """Test that TRACE is more verbose than DEBUG."""
        assert TRACE < logging.DEBUG


class TestFilters:
    """Tests for the logging filters."""

    def test_debug_only(self):
        """Test that only records at DEBUG or below pass."""
        flt = DebugOnlyFilter()
        debug = logging.LogRecord("x", logging.DEBUG, "", 0, "msg", (), None)
        info = logging.LogRecord("x", logging.INFO, "", 0, "msg", (), None)
        assert flt.filter(debug)
        assert not flt.filter(info)

    def test_local_process(self):
        """Test that records of another process are dropped."""
        flt = LocalProcessFilter()
        record = logging.LogRecord("x", logging.DEBUG, "", 0, "msg", (), None)
        assert flt.filter(record)
        record.process = os.getpid() + 1
        assert not flt.filter(record)

    def test_max_level_by_name(self):
        """Test that the level ceiling accepts a level name."""
        flt = MaxLevelFilter("INFO")
        info = logging.LogRecord("x", logging.INFO, "", 0, "msg", (), None)
        warning = logging.LogRecord("x", logging.WARNING, "", 0, "msg", (), None)
        assert flt.filter(info)
        assert not flt.filter(warning)


class TestDecorators:
    """Tests for the entry and exit logging decorators."""

    def test_debug_logger(self, caplog):
        """Test that calls are logged with their bound arguments."""
        caplog.set_level(logging.DEBUG, logger=__name__)
        assert _add(1) == 3
        assert "Calling _add(x=1, y=2)" in caplog.text

    def test_debug_logger_init(self, caplog):
        """Test that constructors are logged once they return."""
        caplog.set_level(logging.DEBUG, logger=__name__)
        thing = _Thing(4)
        assert thing.value == 4
        assert "Calling __init__(self=_Thing(4), value=4)" in caplog.text

    def test_format_call_applies_defaults(self):
        """Test that defaults and keyword arguments are rendered in signature order."""
        assert format_call(_add.__wrapped__, y=5, x=1) == "_add(x=1, y=5)"

    def test_format_call_shortens_arguments(self):
        """Test that long argument representations are cut to the configured length."""
        pb.default_config["logging.max_argument_length"] = 10
        text = format_call(_add.__wrapped__, "abcdefghijklmnop")
        assert text == "_add(x='abcdef..., y=2)"

    def test_silent_by_default(self, caplog):
        """Test that nothing is logged when DEBUG is not enabled."""
        caplog.set_level(logging.WARNING)
        _add(1)
        assert not caplog.records

    def test_package_functions(self, caplog):
        """Test that synthesis routines and box constructors log at DEBUG."""
        caplog.set_level(logging.DEBUG, logger="paulibox")
        box = PauliExpBox(PauliTensor("XZ", 0.25))
        box.to_circuit()
        pauli_gadget(PauliTensor("ZZ", 0.5))

        names = {record.name for record in caplog.records}
        assert "paulibox.circuit.pauli_exp_boxes" in names
        assert "paulibox.circuit.boxes" in names
        assert "paulibox.synthesis.gadgets" in names
