"""Animation curves: cubic Bezier segments and a Newton-Raphson root finder."""

from __future__ import annotations

import enum
from typing import Callable, Dict, List, Sequence, Tuple

from .portable import fourcc_i32

_NEWTON_TOLERANCE = 10e-6
_NEWTON_MAX_ITERATIONS = 1000


class CurveType(enum.IntEnum):
    """Kind of a curve, tagged by a four-character code."""

    LINEAR = fourcc_i32("LINE")
    BEZIER = fourcc_i32("BEZI")


def newton_raphson(
    x0: float, f: Callable[[float], float], fprime: Callable[[float], float]
) -> float:
    """Find a root of ``f`` starting from ``x0``."""
    x1 = x0
    for _ in range(_NEWTON_MAX_ITERATIONS):
        x = x1
        x1 = x - f(x) / fprime(x)
        if abs(x1 - x) < _NEWTON_TOLERANCE:
            return x1
    raise ArithmeticError("Newton-Raphson iteration did not converge")


class Curve:
    """A curve of a given type through a list of knots."""

    def __init__(self, curve_type: CurveType) -> None:
        self.curve_type = curve_type
        self.knots: List[float] = []

    def add_knot(self, knot: float) -> None:
        """Append a knot to the curve."""
        self.knots.append(knot)


class Bezier(Curve):
    """Piecewise cubic Bezier curve with per-knot incoming and outgoing control points."""

    def __init__(
        self,
        knots: Sequence[float] = (),
        incoming: Sequence[float] = (),
        outgoing: Sequence[float] = (),
    ) -> None:
        super().__init__(CurveType.BEZIER)
        if not len(knots) == len(incoming) == len(outgoing):
            raise ValueError("knots and control points must have the same length")
        self._incoming: Dict[float, float] = {}
        self._outgoing: Dict[float, float] = {}
        for knot, inc, out in zip(knots, incoming, outgoing):
            self.knots.append(knot)
            self.add_control_points(knot, inc, out)

    def add_control_points(self, knot: float, incoming: float, outgoing: float) -> None:
        """Record control points for ``knot``; the first points given for a knot are kept."""
        self._incoming.setdefault(knot, incoming)
        self._outgoing.setdefault(knot, outgoing)

    def reverse(self, t: float) -> Tuple[float, int]:
        """Return ``(s, index)``: the segment parameter and segment index reaching ``t``."""
        knots = self.knots
        if len(knots) < 2:
            return 0.0, 0
        if t <= knots[0]:
            return 0.0, 0
        if t >= knots[-1]:
            return 1.0, len(knots)
        idx = next(i for i in range(1, len(knots)) if t < knots[i])
        t0, t1 = knots[idx - 1], knots[idx]
        c0 = self._outgoing[t0]
        c1 = self._incoming[t1]

        def f(s: float) -> float:
            return (
                (t1 - 3.0 * c1 + 3.0 * c0 - t0) * s**3
                + 3.0 * (c1 - 2.0 * c0 + t0) * s**2
                + 3.0 * (c0 - t0) * s
                + t0
                - t
            )

        def fprime(s: float) -> float:
            return (
                3.0 * (t1 - 3.0 * c1 + 3.0 * c0 - t0) * s**2
                + 6.0 * (c1 - 2.0 * c0 + t0) * s
                + 3.0 * (c0 - t0)
            )

        return newton_raphson(0.5, f, fprime), idx

    def interpolate(self, s: float, index: int) -> float:
        """Evaluate segment ``index`` (ending at knot ``index``) at parameter ``s``."""
        knots = self.knots
        if not knots:
            return 0.0
        if len(knots) == 1:
            return knots[0]
        if len(knots) < index + 1:
            return knots[-1]
        if index == 0:
            return knots[0]
        t1, t2 = knots[index - 1], knots[index]
        c1 = self._outgoing[t1]
        c2 = self._incoming[t2]
        return (
            (t2 - 3.0 * c2 + 3.0 * c1 - t1) * s**3
            + 3.0 * (c2 - 2.0 * c1 + t1) * s**2
            + 3.0 * (c1 - t1) * s
            + t1
        )