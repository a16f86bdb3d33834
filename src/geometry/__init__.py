"""Scene geometry: spheres, rectangles, boxes, volumes, instances and the BVH."""
