"""Vectors, rays, intervals, bounding boxes and shared math helpers."""
