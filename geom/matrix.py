"""4x4 matrices with homogeneous coordinates.

A Mat4 holds 16 components in row-major order: the first 4 elements make
up the first row from left to right, and so on, so the element at row i,
column j lives at index i*4+j.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

import numpy as np

from .vector import Vec4

logger = logging.getLogger(__name__)


def _check_index(i) -> None:
    if isinstance(i, slice):
        raise TypeError("Mat4 elements must be indexed one at a time; use row() or as_array()")


class Mat4:
    """Matrix used to transform homogeneous vectors."""

    __slots__ = ("_m",)

    def __init__(self, values: Optional[Sequence[float]] = None):
        if values is None:
            self._m = np.zeros(16, dtype=np.float64)
            return
        m = np.array(values, dtype=np.float64).ravel()
        if m.shape != (16,):
            raise ValueError(f"Mat4 expects 16 values, got {m.size}")
        self._m = m

    def copy(self) -> Mat4:
        return Mat4(self._m)

    def as_array(self) -> np.ndarray:
        """Return a 4x4 copy of the matrix."""
        return self._m.reshape(4, 4).copy()

    def row(self, i: int) -> np.ndarray:
        return self._m[i * 4:i * 4 + 4].copy()

    def __getitem__(self, i):
        _check_index(i)
        return self._m[i].item()

    def __setitem__(self, i, value):
        _check_index(i)
        self._m[i] = value

    def __len__(self) -> int:
        return 16

    def __iter__(self) -> Iterator[float]:
        return iter(self._m.tolist())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    __hash__ = None

    def __repr__(self) -> str:
        rows = ", ".join(str(self.row(i).tolist()) for i in range(4))
        return f"Mat4({rows})"

    def mul(self, n: Mat4) -> None:
        """Multiply the matrix with another one, modifying this one.

        The product is accumulated into a temporary buffer before being
        committed, so multiplying a matrix by itself is safe.

        Args:
            n: Right-hand operand; not modified
        """
        if not isinstance(n, Mat4):
            raise TypeError(f"Expected Mat4 operand, got {type(n).__name__}")
        t = np.zeros(16, dtype=np.float64)
        for i in range(4):
            for j in range(4):
                for k in range(4):
                    t[i * 4 + j] += self._m[i * 4 + k] * n._m[k * 4 + j]
        self._m = t

    def transf(self, v: Vec4) -> Vec4:
        """Return a new vector equal to this matrix times v.

        The result is not normalized; call Vec4.norm() on it if a w of 1
        is needed.

        Args:
            v: Homogeneous vector to transform

        Returns:
            New transformed Vec4
        """
        if not isinstance(v, Vec4):
            raise TypeError(f"Expected Vec4 operand, got {type(v).__name__}")
        p = np.zeros(4, dtype=np.float64)
        for i in range(4):
            for j in range(4):
                p[i] += self._m[i * 4 + j] * v[j]
        return Vec4(*p.tolist())


def zero_mat() -> Mat4:
    """Return a new matrix with all values set to zero."""
    return Mat4()


def identity_mat() -> Mat4:
    """Return a new identity matrix."""
    return Mat4(np.eye(4).ravel())


def rand_mat(rng) -> Mat4:
    """Return a new matrix filled with random values.

    One value is drawn per element in index order 0 through 15, so a
    seeded generator always gives the same matrix.

    Args:
        rng: Random source with a random() method returning uniform floats
            in [0, 1), e.g. numpy.random.Generator or random.Random

    Returns:
        New randomly-filled Mat4
    """
    m = Mat4()
    for i in range(16):
        m[i] = rng.random()
    logger.debug(f"Random matrix: min={min(m):.4f}, max={max(m):.4f}")
    return m
