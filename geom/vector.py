"""Fixed-size vectors for 3D geometry.

This module implements 2D integer vectors, 3D cartesian vectors and
4-component homogeneous vectors. Operations mutate the receiver in place,
except for the cross product and the homogeneous constructor which return
new values.
"""

from __future__ import annotations

import logging
from typing import Iterator

import numpy as np

logger = logging.getLogger(__name__)


def _check_index(i) -> None:
    if isinstance(i, slice):
        raise TypeError("Vector components must be indexed one at a time, not by slice")


class _FixedVector:
    """Base class holding a fixed-length numpy array."""

    __slots__ = ("_v",)

    size = 0
    dtype = np.float64

    def __init__(self, *components):
        if len(components) != self.size:
            raise ValueError(
                f"{type(self).__name__} expects {self.size} components, got {len(components)}"
            )
        self._v = np.array(components, dtype=self.dtype)

    @classmethod
    def from_array(cls, arr) -> "_FixedVector":
        """Build a vector from any array-like of the right length."""
        arr = np.asarray(arr)
        if arr.shape != (cls.size,):
            raise ValueError(f"Expected array of shape ({cls.size},), got {arr.shape}")
        return cls(*arr.tolist())

    def copy(self) -> "_FixedVector":
        return type(self).from_array(self._v)

    def as_array(self) -> np.ndarray:
        """Return a copy of the underlying array."""
        return self._v.copy()

    def __getitem__(self, i):
        _check_index(i)
        return self._v[i].item()

    def __setitem__(self, i, value):
        _check_index(i)
        self._v[i] = value

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator:
        return iter(self._v.tolist())

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self)})"

    @property
    def x(self):
        return self[0]

    @property
    def y(self):
        return self[1]


class Vec2(_FixedVector):
    """A vector in 2D space with integer cartesian coordinates (x, y)."""

    __slots__ = ()

    size = 2
    dtype = np.int64

    def __init__(self, x, y):
        super().__init__(_as_int(x), _as_int(y))

    def __setitem__(self, i, value):
        super().__setitem__(i, _as_int(value))


def _as_int(c) -> int:
    """Return c as an int, rejecting anything that is not a whole number."""
    if isinstance(c, (bool, np.bool_)):
        raise ValueError(f"Vec2 components must be integers, got {c!r}")
    try:
        n = int(c)
    except (OverflowError, TypeError) as e:
        raise ValueError(f"Vec2 components must be integers, got {c!r}") from e
    if n != c:
        raise ValueError(f"Vec2 components must be integers, got {c!r}")
    return n


class Vec3(_FixedVector):
    """A vector in 3D space with cartesian coordinates (x, y, z)."""

    __slots__ = ()

    size = 3

    def __init__(self, x=0.0, y=0.0, z=0.0):
        super().__init__(x, y, z)

    @property
    def z(self) -> float:
        return self[2]

    def length(self) -> float:
        """Euclidean norm of the vector."""
        with np.errstate(over="ignore"):
            return float(np.sqrt(self._v[0] ** 2 + self._v[1] ** 2 + self._v[2] ** 2))

    def norm(self) -> None:
        """Normalize the vector to length 1 keeping its direction.

        The zero vector has no direction and is left unchanged.
        """
        abs_ = self.length()
        if abs_ == 0:
            logger.debug("Skipping normalization of zero-length Vec3")
            return
        self._v /= abs_

    def neg(self) -> None:
        """Negate every component."""
        self._v *= -1.0

    def sub(self, w: Vec3) -> None:
        """Subtract another vector from this one."""
        _check_vec3(w)
        self._v -= w._v

    def add(self, w: Vec3) -> None:
        """Add another vector to this one."""
        _check_vec3(w)
        self._v += w._v

    def scale(self, s: float) -> None:
        self._v *= s


def _check_vec3(w) -> None:
    if not isinstance(w, Vec3):
        raise TypeError(f"Expected Vec3 operand, got {type(w).__name__}")


def cross(v: Vec3, w: Vec3) -> Vec3:
    """Return the right-handed cross product of two vectors.

    Args:
        v: Left operand
        w: Right operand

    Returns:
        New Vec3 equal to v x w; neither input is modified
    """
    _check_vec3(v)
    _check_vec3(w)
    a, b = v._v, w._v
    return Vec3(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


class Vec4(_FixedVector):
    """A vector in 3D space with homogeneous coordinates (x, y, z, w)."""

    __slots__ = ()

    size = 4

    def __init__(self, x=0.0, y=0.0, z=0.0, w=0.0):
        super().__init__(x, y, z, w)

    @property
    def z(self) -> float:
        return self[2]

    @property
    def w(self) -> float:
        return self[3]

    def norm(self) -> None:
        """Divide x, y and z by w so that w becomes 1.

        There is no guard for w == 0: the division yields inf or nan,
        which is how points at infinity come out of projective transforms.
        """
        if self._v[3] == 0:
            logger.debug(f"Homogeneous normalization with w=0: {self!r}")
        with np.errstate(divide="ignore", invalid="ignore"):
            self._v[:3] /= self._v[3]
        self._v[3] = 1.0

    def cartesian(self) -> Vec3:
        """Return the x, y, z components as a Vec3 without dividing by w."""
        return Vec3(*self._v[:3].tolist())


def new_vec4(x: float, y: float, z: float) -> Vec4:
    """Return the homogeneous vector (x, y, z, 1) for cartesian coordinates."""
    return Vec4(x, y, z, 1.0)
