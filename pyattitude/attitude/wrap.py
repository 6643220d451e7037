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
Angle wrapping utilities.

``wrap_euler_angles`` maps any Euler triple onto the ranges produced by
``compute_euler_angles_from_matrix`` without changing the rotation it
describes: phi and psi in [-pi, pi], theta in [-pi/2, pi/2] for
aerodynamics sequences and in [0, pi] for astronomical sequences.
"""

import numpy as np
from numba import njit

from ..core.constants import HALF_PI, TWO_PI
from .sequence import get_euler_info


@njit(cache=True, fastmath=True)
def wrapTo2Pi(v1):
    """
    Wrap angles to [0, 2π] range.

    Parameters
    ----------
    v1 : ndarray
        Vector of angles in radians

    Returns
    -------
    v2 : ndarray
        Vector of normalized angles in radians [0, 2π]
    """
    i = v1 > 0
    v1 = np.mod(v1, TWO_PI)
    v2 = v1.copy()
    v2[(v1 == 0) & i] = TWO_PI
    return v2


@njit(cache=True, fastmath=True)
def wrapToPi(v1):
    """
    Wrap angles to [-π, π] range.

    Parameters
    ----------
    v1 : ndarray
        Vector of angles in radians

    Returns
    -------
    v2 : ndarray
        Vector of normalized angles in radians [-π, π]
    """
    v2 = v1.copy()
    i = (v1 < -np.pi) | (np.pi < v1)
    if np.any(i):
        v2[i] = wrapTo2Pi(v1[i] + np.pi) - np.pi
    return v2


def wrap_euler_angles(euler_sequence, euler_angles):
    """
    Wrap Euler angles to the canonical ranges of their sequence.

    Parameters
    ----------
    euler_sequence : EulerSequence or int
        Rotation sequence
    euler_angles : array_like, shape (3,)
        Euler angles (phi, theta, psi) in radians

    Returns
    -------
    e2 : ndarray, shape (3,)
        Equivalent Euler angles

    Raises
    ------
    InvalidSequenceError
        If the sequence identifier is invalid
    """
    info = get_euler_info(euler_sequence)
    e2 = wrapToPi(np.array(euler_angles, dtype=np.double))
    phi, theta, psi = e2

    if info.is_aerodynamics_sequence:
        # (phi+π, π-theta, psi+π) is the same rotation
        if theta > HALF_PI:
            theta = np.pi - theta
            phi += np.pi
            psi += np.pi
        elif theta < -HALF_PI:
            theta = -np.pi - theta
            phi += np.pi
            psi += np.pi
    elif theta < 0.0:
        # (phi+π, -theta, psi+π) is the same rotation
        theta = -theta
        phi += np.pi
        psi += np.pi

    e2[:] = wrapToPi(np.array([phi, theta, psi]))
    return e2
