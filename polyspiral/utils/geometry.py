"""Leaf-node polygon geometry. Only the error types come from the engine."""

from __future__ import annotations

import math

from polyspiral.engine.errors import DegenerateGeometry

# sin(interior angle) below this is treated as zero
_SIN_EPSILON = 1e-12


def central_angle(sides: int) -> float:
    """Angle subtended at the center by one side, 2π/sides."""
    return 2 * math.pi / sides


def measure(size: float, sides: int, central: float) -> tuple[float, float]:
    """Return (side_length, height) of a regular polygon fitted to a box of edge `size`.

    Odd polygons stand on a flat side with a vertex on top, so the height is
    circumradius + inradius and the side follows from the law of cosines on
    two circumradii. Even polygons fit the box by radius; when sides/2 is odd
    (hexagon) a vertex faces a flat side, otherwise (square, octagon) two
    flat sides face each other.
    """
    if sides % 2:
        circumradius = size / math.sin(((sides - 1) / (sides * 2)) * math.pi) / 2
        inradius = math.cos(central / 2) * circumradius
        a = circumradius**2 * 2
        return math.sqrt(a - a * math.cos(central)), inradius + circumradius

    radius = size / 2
    if (sides // 2) % 2:
        return radius * math.sin(central / 2) * 2, radius * math.cos(central / 2) * 2
    return radius * math.tan(central / 2) * 2, radius * 2


def contraction(spacing: float, central: float) -> tuple[float, float]:
    """Return (inset, outset) for one lap of the spiral.

    inset is the hypotenuse of the right triangle whose opposite leg is
    `spacing`; outset is its adjacent leg, negative when the interior angle
    exceeds the central angle (five sides and up).
    """
    interior = math.pi - central
    sin_interior = math.sin(interior)
    if abs(sin_interior) < _SIN_EPSILON:
        raise DegenerateGeometry(
            f"Interior angle {math.degrees(interior):.3f}° has no usable sine; "
            "a polygon needs at least 3 sides"
        )
    inset = spacing / sin_interior
    outset = math.sqrt(max(inset**2 - spacing**2, 0.0))
    if interior > central:
        outset = -outset
    return inset, outset
