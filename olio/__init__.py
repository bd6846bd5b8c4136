"""A small ray tracer with Phong shading for raytra scene files."""

__version__ = "0.1.0"