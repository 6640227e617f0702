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
"""Pauli letters, Pauli strings and Pauli tensors with symbolic coefficients."""
# pylint:disable=protected-access
from enum import Enum

from paulibox.exceptions import MalformedJsonError
from paulibox.symbolic import equiv_mod, free_symbols, substitute, to_expr


class Pauli(Enum):
    """Single-qubit Pauli operator."""

    I = 0
    X = 1
    Y = 2
    Z = 3

    def __repr__(self):
        return self.name

    @classmethod
    def from_str(cls, letter):
        """Build a Pauli from its letter, e.g. ``"X"``."""
        if isinstance(letter, cls):
            return letter
        try:
            return cls[letter]
        except KeyError as e:
            raise ValueError(f"{letter!r} is not a Pauli letter.") from e

    def to_json(self):
        return self.name

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, str) or data not in cls.__members__:
            raise MalformedJsonError(f"{data!r} is not a Pauli letter.")
        return cls[data]


I = Pauli.I
X = Pauli.X
Y = Pauli.Y
Z = Pauli.Z

anticom_map = {
    I: {I: 0, X: 0, Y: 0, Z: 0},
    X: {I: 0, X: 0, Y: 1, Z: 1},
    Y: {I: 0, X: 1, Y: 0, Z: 1},
    Z: {I: 0, X: 1, Y: 1, Z: 0},
}

_map_I = {
    I: (1, I),
    X: (1, X),
    Y: (1, Y),
    Z: (1, Z),
}
_map_X = {
    I: (1, X),
    X: (1, I),
    Y: (1j, Z),
    Z: (-1j, Y),
}
_map_Y = {
    I: (1, Y),
    X: (-1j, Z),
    Y: (1, I),
    Z: (1j, X),
}
_map_Z = {
    I: (1, Z),
    X: (1j, Y),
    Y: (-1j, X),
    Z: (1, I),
}

mul_map = {I: _map_I, X: _map_X, Y: _map_Y, Z: _map_Z}
"""``mul_map[a][b] == (phase, c)`` such that :math:`a \\cdot b = \\text{phase} \\cdot c`."""


def _to_pauli_list(string):
    if isinstance(string, str):
        return [Pauli.from_str(letter) for letter in string]
    return [Pauli.from_str(p) for p in string]


class QubitPauliMap(dict):
    r"""
    Dictionary used to represent a sparse Pauli string, associating qubits with their
    respective Pauli operators. Identities are never stored.

    .. note::

        A qubit missing from the map carries the identity, so ``m[q]`` returns
        :attr:`Pauli.I` for it.

    **Example**

    >>> m = QubitPauliMap({0: "X", 1: "I", 4: Pauli.Z})
    >>> m
    QubitPauliMap({0: X, 4: Z})
    >>> m[1]
    I
    """

    def __missing__(self, key):
        """If the qubit is not in the map, then no operator acts on it, so return the Identity."""
        return I

    def __init__(self, mapping=None):
        """Strip identities from the map on init!"""
        mapping = {} if mapping is None else mapping
        super().__init__(
            {q: Pauli.from_str(p) for q, p in mapping.items() if Pauli.from_str(p) != I}
        )

    def __setitem__(self, key, value):
        value = Pauli.from_str(value)
        if value == I:
            self.pop(key, None)
        else:
            super().__setitem__(key, value)

    def copy(self):
        return QubitPauliMap(self)

    def __repr__(self):
        return f"QubitPauliMap({dict.__repr__(self)})"


class _PauliTensorBase:
    """Operations shared by dense and sparse Pauli tensors."""

    def __init__(self, coeff=0):
        self.coeff = to_expr(coeff)

    def _letters(self):
        raise NotImplementedError

    def _copy_with(self, coeff):
        raise NotImplementedError

    def size(self) -> int:
        """Number of qubits the string is defined on."""
        raise NotImplementedError

    def is_identity(self) -> bool:
        """Whether every letter of the string is the identity."""
        return all(p == I for p in self._letters())

    def transpose(self):
        r"""Transpose the tensor in place.

        :math:`Y^T = -Y` while the other Paulis are symmetric, so the coefficient is
        multiplied by :math:`(-1)^k` for ``k`` occurrences of ``Y``.
        """
        n_y = sum(1 for p in self._letters() if p == Y)
        if n_y % 2 == 1:
            self.coeff = -self.coeff

    def dagger(self):
        """Return the tensor whose exponential is the adjoint of this one: same string,
        negated coefficient."""
        return self._copy_with(-self.coeff)

    def symbol_substitution(self, sub_map):
        """Return a copy of the tensor with ``sub_map`` substituted into the coefficient."""
        return self._copy_with(substitute(self.coeff, sub_map))

    def free_symbols(self) -> set:
        return free_symbols(self.coeff)

    def equiv_mod(self, other, n) -> bool:
        """Whether the strings agree and the coefficients agree modulo ``n``."""
        return self.string == other.string and equiv_mod(self.coeff, other.coeff, n)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.string == other.string and self.coeff == other.coeff

    def __hash__(self):
        return hash((type(self).__name__, self._hashable_string(), self.coeff))

    def _hashable_string(self):
        raise NotImplementedError


class PauliTensor(_PauliTensorBase):
    """Dense Pauli string paired with a symbolic coefficient.

    The string is an ordered list of :class:`Pauli` whose index is the qubit index.
    The coefficient ``t`` is in half-turns, so that the tensor describes the rotation
    :math:`e^{-i \\pi t / 2 \\, \\sigma_0 \\otimes \\sigma_1 \\otimes \\cdots}`.

    Args:
        string (str or Iterable[Pauli or str]): the Pauli letters, e.g. ``"XYI"``
        coeff (Number or str or sympy.Expr): the coefficient, in half-turns

    **Example**

    >>> t = PauliTensor("XYI", 0.25)
    >>> t.size()
    3
    >>> t.transpose()
    >>> t.coeff
    -0.250000000000000
    """

    def __init__(self, string=(), coeff=0):
        super().__init__(coeff)
        self.string = _to_pauli_list(string)

    def _letters(self):
        return self.string

    def _copy_with(self, coeff):
        return PauliTensor(list(self.string), coeff)

    def _hashable_string(self):
        return tuple(self.string)

    def copy(self):
        return self._copy_with(self.coeff)

    def size(self) -> int:
        return len(self.string)

    def commutes_with(self, other) -> bool:
        """Two strings commute iff an even number of positions hold differing non-identity letters."""
        if isinstance(other, SparsePauliTensor):
            return self.to_sparse().commutes_with(other)
        n_anti = sum(anticom_map[p][q] for p, q in zip(self.string, other.string))
        return n_anti % 2 == 0

    def to_sparse(self):
        """Sparse form over the integer qubit indices, coefficient preserved."""
        return SparsePauliTensor(
            {q: p for q, p in enumerate(self.string) if p != I}, self.coeff
        )

    def __repr__(self):
        letters = "".join(p.name for p in self.string)
        return f"PauliTensor({letters!r}, {self.coeff})"


class SparsePauliTensor(_PauliTensorBase):
    """Sparse Pauli string, a :class:`QubitPauliMap`, paired with a symbolic coefficient.

    Args:
        string (dict): mapping from qubit to Pauli; identities are dropped
        coeff (Number or str or sympy.Expr): the coefficient, in half-turns
    """

    def __init__(self, string=None, coeff=0):
        super().__init__(coeff)
        self.string = QubitPauliMap(string)

    def _letters(self):
        return self.string.values()

    def _copy_with(self, coeff):
        return SparsePauliTensor(self.string.copy(), coeff)

    def _hashable_string(self):
        return frozenset(self.string.items())

    def copy(self):
        return self._copy_with(self.coeff)

    def size(self) -> int:
        return len(self.string)

    def get(self, qubit):
        """The Pauli acting on ``qubit``."""
        return self.string[qubit]

    def commutes_with(self, other) -> bool:
        """Two strings commute iff an even number of shared qubits hold differing letters."""
        if isinstance(other, PauliTensor):
            other = other.to_sparse()
        n_anti = sum(
            anticom_map[p][other.string[q]] for q, p in self.string.items() if q in other.string
        )
        return n_anti % 2 == 0

    def is_diagonal(self) -> bool:
        """Whether the string only holds ``Z`` letters."""
        return all(p == Z for p in self.string.values())

    def to_dense(self, qubits):
        """Dense form over the ordered ``qubits``, coefficient preserved."""
        return PauliTensor([self.string[q] for q in qubits], self.coeff)

    def __repr__(self):
        return f"SparsePauliTensor({dict(self.string)}, {self.coeff})"
