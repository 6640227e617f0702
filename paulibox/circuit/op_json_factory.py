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
Registry of JSON codecs for operations, keyed by the operation's type tag.

Modules defining serializable operations register them at import time, after
which :func:`op_to_json` and :func:`op_from_json` dispatch on the ``"type"`` field.
"""
from collections.abc import Callable, Mapping
from typing import Any

from paulibox.exceptions import MalformedJsonError, UnknownOperatorError

ToJsonFn = Callable[[Any], dict]
FromJsonFn = Callable[[dict], Any]

op_json_registrations: dict[str, tuple[ToJsonFn, FromJsonFn]] = {}


def register_op_factory(type_tag: str, to_json: ToJsonFn, from_json: FromJsonFn):
    """Register the JSON codec of an operation type.

    Args:
        type_tag (str): the tag stored under ``"type"`` in the serialized form,
            such as ``"PauliExpBox"``
        to_json (Callable): serializes an operation to a JSON-compatible ``dict``
        from_json (Callable): rebuilds an operation from its serialized form

    Returns:
        None

    Side Effects:
        A later registration under the same tag replaces the earlier one.
    """
    op_json_registrations[type_tag] = (to_json, from_json)


def is_registered(type_tag: str) -> bool:
    """Returns True if a codec is registered under ``type_tag``."""
    return type_tag in op_json_registrations


def _lookup(type_tag):
    try:
        return op_json_registrations[type_tag]
    except KeyError as e:
        raise UnknownOperatorError(f"No JSON codec registered for operation type {type_tag!r}.") from e


def op_to_json(op) -> dict:
    """Serialize an operation with the codec registered for its type.

    Raises:
        UnknownOperatorError: if no codec is registered for the operation type
    """
    to_json, _ = _lookup(op.type.name)
    return to_json(op)


def op_from_json(data):
    """Rebuild an operation from its serialized form.

    Raises:
        MalformedJsonError: if ``data`` is not a mapping with a ``"type"`` field
        UnknownOperatorError: if no codec is registered for that type
    """
    if not isinstance(data, Mapping) or "type" not in data:
        raise MalformedJsonError(f"Expected an operation object with a 'type' field, got {data!r}.")
    _, from_json = _lookup(data["type"])
    return from_json(data)
