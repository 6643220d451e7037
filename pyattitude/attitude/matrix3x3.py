# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
3x3 matrix utilities.

Small row-major helpers used when composing transformation matrices. The
numeric kernels are compiled with numba; ``orthonormalize`` uses scipy.
"""

import numpy as np
from numba import njit
from scipy.linalg import polar

from ..core.constants import ORTHONORMAL_TOLERANCE


@njit(cache=True, fastmath=True)
def initialize(m):
    """
    Zero a 3x3 matrix in place.

    Parameters
    ----------
    m : ndarray, shape (3, 3)
        Matrix to clear
    """
    for i in range(3):
        for j in range(3):
            m[i, j] = 0.0


@njit(cache=True, fastmath=True)
def identity():
    """Return a new 3x3 identity matrix"""
    m = np.zeros((3, 3), dtype=np.double)
    for i in range(3):
        m[i, i] = 1.0
    return m


@njit(cache=True, fastmath=True)
def product(a, b):
    """
    Compute the matrix product a*b.

    Parameters
    ----------
    a, b : ndarray, shape (3, 3)
        Left and right operands

    Returns
    -------
    c : ndarray, shape (3, 3)
        Product matrix
    """
    c = np.zeros((3, 3), dtype=np.double)
    for i in range(3):
        for j in range(3):
            c[i, j] = a[i, 0]*b[0, j] + a[i, 1]*b[1, j] + a[i, 2]*b[2, j]
    return c


@njit(cache=True, fastmath=True)
def transpose(m):
    """Return the transpose of a 3x3 matrix as a new array"""
    t = np.empty((3, 3), dtype=np.double)
    for i in range(3):
        for j in range(3):
            t[i, j] = m[j, i]
    return t


@njit(cache=True, fastmath=True)
def transform(m, v):
    """
    Transform a vector, returning m*v.

    Parameters
    ----------
    m : ndarray, shape (3, 3)
        Transformation matrix
    v : ndarray, shape (3,)
        Vector to transform

    Returns
    -------
    ndarray, shape (3,)
    """
    out = np.empty(3, dtype=np.double)
    for i in range(3):
        out[i] = m[i, 0]*v[0] + m[i, 1]*v[1] + m[i, 2]*v[2]
    return out


@njit(cache=True, fastmath=True)
def determinant(m):
    """Determinant of a 3x3 matrix"""
    return (m[0, 0]*(m[1, 1]*m[2, 2] - m[1, 2]*m[2, 1])
            - m[0, 1]*(m[1, 0]*m[2, 2] - m[1, 2]*m[2, 0])
            + m[0, 2]*(m[1, 0]*m[2, 1] - m[1, 1]*m[2, 0]))


def is_orthonormal(m, tol=ORTHONORMAL_TOLERANCE):
    """
    Check whether a matrix is a proper rotation.

    Parameters
    ----------
    m : array_like, shape (3, 3)
        Matrix to check
    tol : float, optional
        Allowed deviation of m*m' from identity and of det(m) from one

    Returns
    -------
    bool
    """
    m = np.asarray(m, dtype=np.double)
    if m.shape != (3, 3):
        return False
    gram = product(m, transpose(m))
    if np.max(np.abs(gram - identity())) > tol:
        return False
    return abs(determinant(m) - 1.0) <= tol


def orthonormalize(m):
    """
    Find the proper rotation nearest to a nearly orthonormal matrix.

    Uses the polar decomposition m = U*P; U is the closest orthonormal
    matrix in the Frobenius norm.

    Parameters
    ----------
    m : array_like, shape (3, 3)
        Matrix with accumulated numerical error

    Returns
    -------
    ndarray, shape (3, 3)

    Raises
    ------
    ValueError
        If the matrix is not 3x3 or is closer to a reflection than a rotation
    """
    m = np.asarray(m, dtype=np.double)
    if m.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {m.shape}")
    u, _ = polar(m)
    if determinant(u) < 0.0:
        raise ValueError("Matrix is a reflection, not a rotation")
    return u
