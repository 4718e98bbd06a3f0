"""Transforms, cameras, primitive meshes, scene objects and JSON scene saves for a small 3D engine."""

__version__ = "0.1.0"