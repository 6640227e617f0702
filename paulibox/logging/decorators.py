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
"""Entry and exit logging decorators for paulibox functions and constructors.

Arguments are rendered with their ``repr``, cut to ``logging.max_argument_length``
characters from :data:`paulibox.default_config`, so that boxes holding many Pauli
gadgets do not flood the log.
"""

import inspect
import logging
from functools import partial, wraps

DEFAULT_MAX_ARGUMENT_LENGTH = 200

# Moves the record location past the wrapper, onto the decorated call site.
_debug_log_kwargs = {"stacklevel": 2}


def _max_argument_length():
    # pylint: disable=import-outside-toplevel
    from paulibox import default_config

    return int(default_config.get("logging.max_argument_length", DEFAULT_MAX_ARGUMENT_LENGTH))


def _shorten(text, limit):
    if len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)] + "..."


def format_call(func, *args, **kwargs) -> str:
    """Render a call as ``name(arg=value, ...)`` with defaults applied.

    **Example**

    >>> def rotate(angle, qubit=0):
    ...     pass
    >>> format_call(rotate, 0.5)
    'rotate(angle=0.5, qubit=0)'
    """
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    limit = _max_argument_length()
    arguments = ", ".join(
        f"{name}={_shorten(repr(value), limit)}" for name, value in bound.arguments.items()
    )
    return f"{func.__name__}({arguments})"


def _caller(depth):
    frame = inspect.getouterframes(inspect.currentframe(), 2)[depth]
    return f"{frame.filename}::L{frame.lineno}"


def log_string_debug_func(func, log_level, use_entry):
    """
    Wrap ``func`` so that each call is logged on the logger of the module defining
    ``func``, with its bound arguments and the location of the caller. Entry logging
    records the call before it runs; exit logging records it, with the returned value,
    once it has returned.
    """
    lgr = logging.getLogger(func.__module__)

    @wraps(func)
    def wrapper_entry(*args, **kwargs):
        if lgr.isEnabledFor(log_level):
            lgr.log(
                log_level,
                "Calling %s from %s",
                format_call(func, *args, **kwargs),
                _caller(2),
                **_debug_log_kwargs,
            )
        return func(*args, **kwargs)

    @wraps(func)
    def wrapper_exit(*args, **kwargs):
        output = func(*args, **kwargs)
        if lgr.isEnabledFor(log_level):
            lgr.log(
                log_level,
                "Calling %s=%s from %s",
                format_call(func, *args, **kwargs),
                _shorten(repr(output), _max_argument_length()),
                _caller(2),
                **_debug_log_kwargs,
            )
        return output

    return wrapper_entry if use_entry else wrapper_exit


# ``debug_logger`` decorates synthesis routines and public methods, ``debug_logger_init`` box constructors.
debug_logger = partial(log_string_debug_func, log_level=logging.DEBUG, use_entry=True)
debug_logger_init = partial(log_string_debug_func, log_level=logging.DEBUG, use_entry=False)
