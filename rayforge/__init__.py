"""A small recursive ray tracer: vectors, colours, materials, primitives, scenes, rendering and PPM output."""

__version__ = "0.1.0"