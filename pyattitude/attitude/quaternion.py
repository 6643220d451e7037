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
Quaternion utilities.

Quaternions are numpy arrays [w, x, y, z] with the scalar part first and use
the Hamilton product. A quaternion q built by the Euler conversions is a left
transformation quaternion: ``quat2dcm(q)`` is the transformation matrix that
``compute_matrix_from_euler_angles`` builds from the same angles, and the
product ``q2 * q1`` represents the transformation ``T2 * T1``.
"""

import numpy as np
from numba import njit

from ..core.constants import QUATERNION_ZERO_NORM


@njit(cache=True, fastmath=True)
def quat_multiply(lhs, rhs):
    """
    Multiply two quaternions.

    Parameters
    ----------
    lhs, rhs : ndarray, shape (4,)
        Quaternions [w, x, y, z]

    Returns
    -------
    q : ndarray, shape (4,)
        Hamilton product lhs*rhs
    """
    w1, x1, y1, z1 = lhs[0], lhs[1], lhs[2], lhs[3]
    w2, x2, y2, z2 = rhs[0], rhs[1], rhs[2], rhs[3]
    q = np.array([w1*w2 - x1*x2 - y1*y2 - z1*z2,
                  w1*x2 + x1*w2 + y1*z2 - z1*y2,
                  w1*y2 - x1*z2 + y1*w2 + z1*x2,
                  w1*z2 + x1*y2 - y1*x2 + z1*w2],
                 dtype=np.double)
    return q


@njit(cache=True, fastmath=True)
def quat_norm(q):
    """Euclidean norm of a quaternion"""
    return np.sqrt(q[0]*q[0] + q[1]*q[1] + q[2]*q[2] + q[3]*q[3])


@njit(cache=True)
def quat_normalize(q):
    """
    Scale a quaternion to unit norm in place.

    A zero quaternion is left unchanged.

    Parameters
    ----------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z], modified in place

    Returns
    -------
    bool
        False if the quaternion could not be normalized
    """
    norm = quat_norm(q)
    if norm < QUATERNION_ZERO_NORM:
        return False
    for i in range(4):
        q[i] /= norm
    return True


@njit(cache=True, fastmath=True)
def quat_conjugate(q):
    """Conjugate [w, -x, -y, -z]; the inverse of a unit quaternion"""
    return np.array([q[0], -q[1], -q[2], -q[3]], dtype=np.double)


@njit(cache=True, fastmath=True)
def quat2dcm(q):
    """
    Convert a unit quaternion to its transformation matrix.

    Parameters
    ----------
    q : array_like, shape (4,)
        Unit quaternion [w, x, y, z]

    Returns
    -------
    C : ndarray, shape (3, 3)
        Direction cosine matrix
    """
    w, x, y, z = q[0], q[1], q[2], q[3]
    C = np.array([[w*w + x*x - y*y - z*z,         2*(x*y - w*z),          2*(w*y + x*z)],
                  [        2*(w*z + x*y), w*w - x*x + y*y - z*z,          2*(y*z - w*x)],
                  [        2*(x*z - w*y),         2*(y*z + w*x),  w*w - x*x - y*y + z*z]],
                 dtype=np.double)
    return C


@njit(cache=True)
def dcm2quat(C):
    """
    Convert a transformation matrix to a unit quaternion.

    Shepperd's method: the branch is picked from the largest of the trace
    and the diagonal elements. The result has a non-negative scalar part.

    Parameters
    ----------
    C : array_like, shape (3, 3)
        Orthonormal direction cosine matrix

    Returns
    -------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z]
    """
    trace = C[0, 0] + C[1, 1] + C[2, 2]

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (C[2, 1] - C[1, 2]) * s
        y = (C[0, 2] - C[2, 0]) * s
        z = (C[1, 0] - C[0, 1]) * s
    elif C[0, 0] > C[1, 1] and C[0, 0] > C[2, 2]:
        s = 2.0 * np.sqrt(1.0 + C[0, 0] - C[1, 1] - C[2, 2])
        w = (C[2, 1] - C[1, 2]) / s
        x = 0.25 * s
        y = (C[0, 1] + C[1, 0]) / s
        z = (C[0, 2] + C[2, 0]) / s
    elif C[1, 1] > C[2, 2]:
        s = 2.0 * np.sqrt(1.0 + C[1, 1] - C[0, 0] - C[2, 2])
        w = (C[0, 2] - C[2, 0]) / s
        x = (C[0, 1] + C[1, 0]) / s
        y = 0.25 * s
        z = (C[1, 2] + C[2, 1]) / s
    else:
        s = 2.0 * np.sqrt(1.0 + C[2, 2] - C[0, 0] - C[1, 1])
        w = (C[1, 0] - C[0, 1]) / s
        x = (C[0, 2] + C[2, 0]) / s
        y = (C[1, 2] + C[2, 1]) / s
        z = 0.25 * s

    q = np.array([w, x, y, z], dtype=np.double)
    if q[0] < 0.0:
        q = -q
    quat_normalize(q)
    return q
