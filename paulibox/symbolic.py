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
Helpers for symbolic phases. A phase is a :class:`sympy.Expr` measured in half-turns,
possibly containing free symbols that are bound later by substitution.
"""
import re
from numbers import Number
from tokenize import TokenError

import sympy as sp
from sympy.parsing.sympy_parser import auto_number, auto_symbol, convert_xor, parse_expr

from paulibox.exceptions import MalformedJsonError

DEFAULT_TOLERANCE = 1e-11


def _tolerance():
    # pylint: disable=import-outside-toplevel
    from paulibox import default_config

    return float(default_config.get("symbolic.tolerance", DEFAULT_TOLERANCE))


# Phase strings are limited to names, numbers, arithmetic and parentheses.
_PHASE_TOKENS = re.compile(
    r"(?:[A-Za-z_][A-Za-z0-9_]*|(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|[-+*/^()\s])*"
)
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_PHASE_NAMESPACE = {
    "__builtins__": {},
    "Symbol": sp.Symbol,
    "Integer": sp.Integer,
    "Float": sp.Float,
    "Rational": sp.Rational,
    "pi": sp.pi,
    "E": sp.E,
    "I": sp.I,
    "sqrt": sp.sqrt,
    "exp": sp.exp,
    "log": sp.log,
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "Abs": sp.Abs,
}

_PHASE_TRANSFORMATIONS = (auto_symbol, auto_number, convert_xor)


def parse_phase(text) -> sp.Expr:
    """Parse the string form of a phase without evaluating arbitrary code.

    Only names, numbers, ``+ - * / ^ **`` and parentheses are accepted. Names other
    than ``pi``, ``E``, ``I`` and the elementary functions become free symbols.

    >>> parse_phase("a/2 + pi/4")
    a/2 + pi/4

    Raises:
        ValueError: if ``text`` is not an arithmetic expression of that form
    """
    if not _PHASE_TOKENS.fullmatch(text) or "__" in text:
        raise ValueError(f"{text!r} is not an arithmetic phase expression.")
    local_dict = {
        name: sp.Symbol(name)
        for name in _IDENTIFIER.findall(text)
        if name not in _PHASE_NAMESPACE
    }
    try:
        expr = parse_expr(
            text,
            local_dict=local_dict,
            global_dict=dict(_PHASE_NAMESPACE),
            transformations=_PHASE_TRANSFORMATIONS,
        )
    except (sp.SympifyError, SyntaxError, TokenError, TypeError, ValueError) as e:
        raise ValueError(f"{text!r} is not an arithmetic phase expression.") from e
    if not isinstance(expr, sp.Expr):
        raise ValueError(f"{text!r} is not an arithmetic phase expression.")
    return expr


def to_expr(value) -> sp.Expr:
    """Convert a number, string or sympy object into a sympy expression.

    >>> to_expr(0.5)
    0.500000000000000
    >>> to_expr("2*a")
    2*a
    """
    if isinstance(value, sp.Basic):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Cannot interpret {value!r} as a phase.")
    if isinstance(value, str):
        return parse_phase(value)
    return sp.sympify(value)


def free_symbols(*exprs) -> set:
    """Union of the free symbols of the given expressions."""
    symbols = set()
    for e in exprs:
        symbols |= to_expr(e).free_symbols
    return symbols


def is_closed(expr) -> bool:
    """Whether ``expr`` contains no free symbols."""
    return not to_expr(expr).free_symbols


def equiv_mod(a, b, n) -> bool:
    r"""Check whether :math:`a - b \equiv 0 \pmod{n}`.

    Closed differences use ordinary modular arithmetic up to the configured
    tolerance. Symbolic differences are equivalent only when :math:`(a-b)/n`
    provably simplifies to an integer.

    **Example**

    >>> equiv_mod(0.5, 4.5, 4)
    True
    >>> a = sympy.Symbol("a")
    >>> equiv_mod(a + 4, a, 4)
    True
    >>> equiv_mod(a, 0, 4)
    False
    """
    diff = sp.expand(to_expr(a) - to_expr(b))
    if diff.free_symbols:
        quotient = sp.simplify(diff / n)
        return quotient.is_integer is True
    value = float(diff)
    tol = _tolerance()
    remainder = value % n
    return remainder < tol or n - remainder < tol


def equiv_0(expr, n=2) -> bool:
    r"""Check whether :math:`e \equiv 0 \pmod{n}`."""
    return equiv_mod(expr, 0, n)


def substitute(expr, sub_map) -> sp.Expr:
    """Substitute symbols in ``expr`` according to ``sub_map``."""
    return to_expr(expr).subs({to_expr(k): to_expr(v) for k, v in sub_map.items()})


def expr_to_json(expr):
    """Serialize a phase: integers and closed numbers as JSON numbers, anything
    symbolic as its string form."""
    expr = to_expr(expr)
    if expr.is_Integer:
        return int(expr)
    if expr.is_number:
        return float(expr)
    return str(expr)


def expr_from_json(value) -> sp.Expr:
    """Inverse of :func:`expr_to_json`."""
    if isinstance(value, bool) or not isinstance(value, (Number, str)):
        raise MalformedJsonError(f"Cannot parse {value!r} as a phase expression.")
    try:
        return to_expr(value)
    except (ValueError, TypeError, sp.SympifyError) as e:
        raise MalformedJsonError(f"Cannot parse {value!r} as a phase expression.") from e
