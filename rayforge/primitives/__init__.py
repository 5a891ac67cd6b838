"""Geometric primitives, composites of them, and axis rotation helpers."""