"""Fixed-size vectors and 4x4 homogeneous matrices for 3D geometry.

Points and directions are manipulated with Vec3 and Vec4, and rigid or
projective transforms are composed and applied with Mat4.
"""

from __future__ import annotations

from .matrix import Mat4, identity_mat, rand_mat, zero_mat
from .vector import Vec2, Vec3, Vec4, cross, new_vec4

__version__ = "0.1.0"

__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
    "cross",
    "new_vec4",
    "Mat4",
    "zero_mat",
    "identity_mat",
    "rand_mat",
]
