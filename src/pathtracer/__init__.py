"""Offline CPU path tracer.

Subpackages:
    core: Vectors, rays, bounding boxes and sampling helpers
    geometry: Hittable primitives, transforms, media and the BVH
    materials: Scattering models and textures
    camera: Thin-lens camera with motion-blur shutter
    renderer: Integrator, sample loop, tone mapping and image output
"""

__version__ = "0.1.0"
