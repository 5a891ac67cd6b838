"""Real roots of quadratic and cubic polynomials."""

from __future__ import annotations

import math

EPSILON = 1e-6


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, ...]:
    """Real roots of ``a*x**2 + b*x + c = 0``.

    A vanishing leading coefficient falls back to the linear equation.
    A discriminant within ``EPSILON`` of zero yields a single root.
    """
    if abs(a) < EPSILON:
        if abs(b) < EPSILON:
            return ()
        return (-c / b,)

    discriminant = b * b - 4 * a * c
    if discriminant < -EPSILON:
        return ()
    if discriminant < EPSILON:
        return (-b / (2 * a),)

    root = math.sqrt(discriminant)
    return ((-b - root) / (2 * a), (-b + root) / (2 * a))


def solve_cubic(a: float, b: float, c: float, d: float) -> tuple[float, ...]:
    """Real roots of ``a*x**3 + b*x**2 + c*x + d = 0``.

    Uses the trigonometric method when the discriminant is non-negative.
    A clearly negative discriminant yields no roots; one that lies just
    below zero (within ``EPSILON``) yields a single root.
    """
    if abs(a) < EPSILON:
        return solve_quadratic(b, c, d)

    b /= a
    c /= a
    d /= a

    q = (b * b - 3 * c) / 9.0
    r = (2 * b * b * b - 9 * b * c + 27 * d) / 54.0
    q3 = q * q * q
    discriminant = q3 - r * r

    if discriminant < -EPSILON:
        return ()

    shift = b / 3
    if discriminant >= 0:
        if q3 > 0:
            theta = math.acos(max(-1.0, min(1.0, r / math.sqrt(q3))))
        else:
            theta = 0.0
        scale = -2 * math.sqrt(max(q, 0.0))
        return (
            scale * math.cos(theta / 3) - shift,
            scale * math.cos((theta + 2 * math.pi) / 3) - shift,
            scale * math.cos((theta - 2 * math.pi) / 3) - shift,
        )

    big_a = -((abs(r) + math.sqrt(-discriminant)) ** (1.0 / 3.0))
    if r < 0:
        big_a = -big_a
    big_b = 0.0 if abs(big_a) < EPSILON else q / big_a
    return ((big_a + big_b) - shift,)