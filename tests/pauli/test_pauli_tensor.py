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
Unit tests for Pauli letters, :class:`QubitPauliMap` and the Pauli tensors.
"""
import pytest
import sympy as sp

from paulibox.exceptions import MalformedJsonError
from paulibox.pauli import (
    I,
    X,
    Y,
    Z,
    Pauli,
    PauliTensor,
    QubitPauliMap,
    SparsePauliTensor,
    anticom_map,
    mul_map,
)


class TestPauli:
    """Tests for single-qubit Pauli letters."""

    @pytest.mark.parametrize("letter, pauli", [("I", I), ("X", X), ("Y", Y), ("Z", Z)])
    def test_from_str(self, letter, pauli):
        """Test building letters from strings."""
        assert Pauli.from_str(letter) is pauli
        assert Pauli.from_str(pauli) is pauli

    def test_from_str_invalid(self):
        """Test that unknown letters are rejected."""
        with pytest.raises(ValueError, match="is not a Pauli letter"):
            Pauli.from_str("W")

    def test_json(self):
        """Test the JSON form of letters."""
        assert [p.to_json() for p in Pauli] == ["I", "X", "Y", "Z"]
        assert Pauli.from_json("Y") is Y
        with pytest.raises(MalformedJsonError, match="is not a Pauli letter"):
            Pauli.from_json("x")
        with pytest.raises(MalformedJsonError, match="is not a Pauli letter"):
            Pauli.from_json(2)

    @pytest.mark.parametrize("a", list(Pauli))
    @pytest.mark.parametrize("b", list(Pauli))
    def test_mul_map_consistent_with_anticom_map(self, a, b):
        """Test that two letters anticommute iff their products differ by a sign."""
        ph_ab, c_ab = mul_map[a][b]
        ph_ba, c_ba = mul_map[b][a]
        assert c_ab == c_ba
        assert (ph_ab == -ph_ba) == bool(anticom_map[a][b])


class TestQubitPauliMap:
    """Tests for the sparse Pauli string dictionary."""

    def test_strips_identities(self):
        """Test that identities are dropped on construction and assignment."""
        m = QubitPauliMap({0: "X", 1: "I", 4: Z})
        assert dict(m) == {0: X, 4: Z}
        m[0] = I
        assert dict(m) == {4: Z}

    def test_missing_is_identity(self):
        """Test that unset qubits hold the identity."""
        m = QubitPauliMap({2: "Y"})
        assert m[0] is I
        assert 0 not in m

    def test_copy_is_independent(self):
        """Test that copies do not share state."""
        m = QubitPauliMap({0: "X"})
        c = m.copy()
        c[1] = "Z"
        assert isinstance(c, QubitPauliMap)
        assert 1 not in m


class TestPauliTensor:
    """Tests for dense Pauli tensors."""

    def test_construction(self):
        """Test building from a string of letters."""
        t = PauliTensor("XYI", 0.25)
        assert t.string == [X, Y, I]
        assert t.coeff == sp.Float(0.25)
        assert t.size() == 3
        assert PauliTensor().size() == 0

    @pytest.mark.parametrize(
        "string, sign", [("XZ", 1), ("YZ", -1), ("YY", 1), ("YYY", -1), ("", 1)]
    )
    def test_transpose(self, string, sign):
        """Test that transposing flips the sign once per Y letter, in place."""
        t = PauliTensor(string, 0.3)
        assert t.transpose() is None
        assert t.coeff == sign * sp.Float(0.3)
        assert t.string == PauliTensor(string).string

    def test_transpose_involution(self):
        """Test that transposing twice is the identity."""
        t = PauliTensor("XYZY", "a")
        t.transpose()
        t.transpose()
        assert t == PauliTensor("XYZY", "a")

    def test_dagger(self):
        """Test that the dagger negates the coefficient and leaves the original untouched."""
        t = PauliTensor("XY", 0.5)
        d = t.dagger()
        assert d.coeff == -sp.Float(0.5)
        assert d.string == t.string
        assert t.coeff == sp.Float(0.5)
        assert d.dagger() == t

    @pytest.mark.parametrize(
        "s1, s2, expected",
        [
            ("XZ", "ZX", True),
            ("XI", "ZI", False),
            ("XYZ", "XYZ", True),
            ("XXI", "YZZ", True),
            ("XXI", "YXZ", False),
            ("III", "XYZ", True),
        ],
    )
    def test_commutes_with(self, s1, s2, expected):
        """Test commutation by the parity of differing non-identity positions."""
        t1, t2 = PauliTensor(s1), PauliTensor(s2)
        assert t1.commutes_with(t2) is expected
        assert t2.commutes_with(t1) is expected
        assert t1.commutes_with(t2.to_sparse()) is expected

    def test_equiv_mod(self):
        """Test comparison of strings with coefficients modulo n."""
        assert PauliTensor("XZ", 0.5).equiv_mod(PauliTensor("XZ", 4.5), 4)
        assert not PauliTensor("XZ", 0.5).equiv_mod(PauliTensor("XZ", 2.5), 4)
        assert not PauliTensor("XZ", 0.5).equiv_mod(PauliTensor("ZX", 0.5), 4)

    def test_symbols(self, symbols):
        """Test free symbols and their substitution."""
        a, b = symbols
        t = PauliTensor("XZ", a + b)
        assert t.free_symbols() == {a, b}
        s = t.symbol_substitution({a: 1})
        assert s.coeff == 1 + b
        assert t.coeff == a + b

    def test_is_identity(self):
        """Test recognising all-identity strings."""
        assert PauliTensor("III").is_identity()
        assert PauliTensor().is_identity()
        assert not PauliTensor("IZI").is_identity()

    def test_sparse_round_trip(self):
        """Test converting to sparse form and back over the same qubits."""
        t = PauliTensor("XIZ", 0.1)
        s = t.to_sparse()
        assert dict(s.string) == {0: X, 2: Z}
        assert s.coeff == t.coeff
        assert s.to_dense([0, 1, 2]) == t

    def test_hash(self):
        """Test that equal tensors hash equally."""
        assert hash(PauliTensor("XY", 1)) == hash(PauliTensor([X, Y], 1))
        assert len({PauliTensor("XY", 1), PauliTensor("XY", 1), PauliTensor("YX", 1)}) == 2


class TestSparsePauliTensor:
    """Tests for sparse Pauli tensors."""

    def test_size_counts_non_identities(self):
        """Test that the size is the number of non-identity letters."""
        t = SparsePauliTensor({0: "X", 3: "I", 5: "Z"})
        assert t.size() == 2
        assert t.get(5) is Z
        assert t.get(3) is I

    def test_commutes_with_over_shared_qubits(self):
        """Test commutation only counts qubits in both strings."""
        t1 = SparsePauliTensor({0: "X", 1: "Z"})
        t2 = SparsePauliTensor({1: "X", 2: "Y"})
        t3 = SparsePauliTensor({0: "Z", 1: "X"})
        assert not t1.commutes_with(t2)
        assert t1.commutes_with(t3)
        assert t2.commutes_with(SparsePauliTensor({7: "X"}))

    def test_is_diagonal(self):
        """Test recognising Z-only strings."""
        assert SparsePauliTensor({0: "Z", 4: "Z"}).is_diagonal()
        assert SparsePauliTensor().is_diagonal()
        assert not SparsePauliTensor({0: "Z", 4: "Y"}).is_diagonal()

    def test_to_dense_pads_identities(self):
        """Test dense conversion over a chosen qubit order."""
        t = SparsePauliTensor({"q1": "Y", "q0": "X"}, 0.2)
        d = t.to_dense(["q0", "q1", "q2"])
        assert d.string == [X, Y, I]
        assert d.coeff == t.coeff

    def test_transpose_and_dagger(self):
        """Test the sparse transpose and dagger."""
        t = SparsePauliTensor({0: "Y", 2: "X"}, 0.4)
        d = t.dagger()
        t.transpose()
        assert t.coeff == -sp.Float(0.4)
        assert d.coeff == -sp.Float(0.4)
        assert d.string == t.string
