"""Writing images in the plain-text PPM (P3) format."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike

from rayforge.color import Color


def format_ppm(image: Sequence[Sequence[Color]]) -> str:
    """Text of a P3 PPM file for rows of colours.

    The width is taken from the first row.
    """
    height = len(image)
    width = len(image[0]) if height else 0
    lines = [f"P3\n{width} {height}\n255\n"]
    for row in image:
        lines.append("".join(f"{p.r} {p.g} {p.b} " for p in row) + "\n")
    return "".join(lines)


def write_ppm(path: str | PathLike[str], image: Sequence[Sequence[Color]]) -> None:
    """Write ``image`` to ``path`` as a P3 PPM file; raises OSError on failure."""
    with open(path, "w", encoding="ascii", newline="\n") as handle:
        handle.write(format_ppm(image))