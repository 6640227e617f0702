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
This module contains all the custom exceptions used in paulibox.

.. warning::

    Unless you are extending paulibox, you will likely not need to use these
    classes directly. They are raised by paulibox functions when errors are
    encountered.

Contents
--------

.. currentmodule:: paulibox.exceptions

Box and Circuit Errors
~~~~~~~~~~~~~~~~~~~~~~

.. autosummary::
    :toctree: api

    ~InvalidPauliExpError
    ~CircuitError

Architecture Errors
~~~~~~~~~~~~~~~~~~~

.. autosummary::
    :toctree: api

    ~InvalidArchitectureError
    ~NodesNotConnectedError
    ~NodeError

Serialization Errors
~~~~~~~~~~~~~~~~~~~~

.. autosummary::
    :toctree: api

    ~UnknownOperatorError
    ~MalformedJsonError

"""  # pragma: no cover

# =============================================================================
# Box and Circuit Errors
# =============================================================================


class InvalidPauliExpError(ValueError):
    """Raised when a Pauli-exponential box is built from inconsistent Pauli strings,
    e.g. strings of different length or a non-commuting set."""


class CircuitError(ValueError):
    """Raised when an operation is scheduled on a circuit in an invalid way."""


# =============================================================================
# Architecture Errors
# =============================================================================


class InvalidArchitectureError(ValueError):
    """Raised when an operation cannot be carried out on an :class:`~.Architecture`."""


class NodesNotConnectedError(InvalidArchitectureError):
    """Raised when a distance is requested between two nodes with no path between them."""


class NodeError(ValueError):
    """Raised by a :class:`~.Node` when its register name or index is invalid."""


# =============================================================================
# Serialization Errors
# =============================================================================


class UnknownOperatorError(KeyError):
    """Raised when the operator factory is asked to decode an unregistered type tag."""


class MalformedJsonError(ValueError):
    """Raised when a JSON description is missing a field, has the wrong shape, or
    holds a value that cannot be parsed."""
