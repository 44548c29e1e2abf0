"""Vectors, rays, bounding boxes and sampling helpers."""
