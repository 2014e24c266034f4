"""Polynomials kept as terms in strictly decreasing order of exponent."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Term:
    """One term: coeff times x to the power exp."""

    coeff: float
    exp: int


_TermLike = Union[Term, tuple[float, int]]


class Polynomial:
    """A polynomial whose terms are listed with exponents strictly decreasing.

    Terms are kept as given: like terms are combined when adding, but a zero
    coefficient is not dropped.
    """

    def __init__(self, terms: Iterable[_TermLike] = ()) -> None:
        parsed: list[Term] = []
        for term in terms:
            coeff, exp = (term.coeff, term.exp) if isinstance(term, Term) else term
            parsed.append(Term(float(coeff), int(exp)))
        for higher, lower in zip(parsed, parsed[1:]):
            if lower.exp >= higher.exp:
                raise ValueError("exponents must be strictly decreasing")
        self._terms = tuple(parsed)

    def add(self, other: Polynomial) -> Polynomial:
        """The sum of two polynomials, merging terms by exponent."""
        mine, theirs = self._terms, other._terms
        out: list[Term] = []
        i = j = 0
        while i < len(mine) and j < len(theirs):
            a, b = mine[i], theirs[j]
            if a.exp > b.exp:
                out.append(a)
                i += 1
            elif a.exp < b.exp:
                out.append(b)
                j += 1
            else:
                out.append(Term(a.coeff + b.coeff, a.exp))
                i += 1
                j += 1
        out.extend(mine[i:])
        out.extend(theirs[j:])
        return Polynomial(out)

    def multiply(self, other: Polynomial) -> Polynomial:
        """The product of two polynomials, summing one partial product per term."""
        result = Polynomial()
        for a in self._terms:
            partial = Polynomial(
                Term(a.coeff * b.coeff, a.exp + b.exp) for b in other._terms
            )
            result = result.add(partial)
        return result

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    __hash__ = None  # type: ignore[assignment]

    def format(self) -> str:
        """Terms as ``c.ccx^e`` joined by `` + ``; a final constant shows no ``x``.

        An empty polynomial is shown as ``0.00``.
        """
        if not self._terms:
            return "0.00"
        parts = [f"{t.coeff:.2f}x^{t.exp}" for t in self._terms[:-1]]
        last = self._terms[-1]
        parts.append(f"{last.coeff:.2f}" if last.exp == 0 else f"{last.coeff:.2f}x^{last.exp}")
        return " + ".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[(t.coeff, t.exp) for t in self._terms]!r})"