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
Conversions between Euler angles and the other attitude representations.

Euler angles are a triple (phi, theta, psi) in radians, applied in the order
given by an ``EulerSequence``. The composite transformation of a sequence
with axes (a0, a1, a2) is T = T_a2(psi) * T_a1(theta) * T_a0(phi): each
rotation acts on coordinates already rotated by the previous ones.

Every public conversion validates the sequence first. An invalid sequence is
reported through the message handler; the conversion then returns None and
leaves ``out`` untouched.

References:
    JSC Engineering Orbital Dynamics, Orientation model documentation
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

import logging

import numpy as np
from numba import njit

from ..core.constants import GIMBAL_LOCK_THRESHOLD, HALF_PI
from ..core.messages import OrientationMessages, get_message_handler
from .matrix3x3 import product
from .quaternion import quat2dcm, quat_multiply, quat_normalize
from .sequence import InvalidSequenceError, get_euler_info

logger = logging.getLogger(__name__)

__all__ = [
    'rot_x', 'rot_y', 'rot_z',
    'compute_quaternion_from_euler_angles',
    'compute_matrix_from_euler_angles',
    'compute_euler_angles_from_matrix',
    'compute_euler_angles_from_quaternion',
]


@njit(cache=True, fastmath=True)
def rot_x(phi):
    """
    Transformation matrix for a rotation about the x-axis.

    Parameters
    ----------
    phi : float
        Rotation angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
    """
    sinP = np.sin(phi)
    cosP = np.cos(phi)
    R = np.array([[1.0,   0.0,  0.0],
                  [0.0,  cosP, sinP],
                  [0.0, -sinP, cosP]],
                 dtype=np.double)
    return R


@njit(cache=True, fastmath=True)
def rot_y(theta):
    """
    Transformation matrix for a rotation about the y-axis.

    Parameters
    ----------
    theta : float
        Rotation angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
    """
    sinT = np.sin(theta)
    cosT = np.cos(theta)
    R = np.array([[cosT, 0.0, -sinT],
                  [ 0.0, 1.0,   0.0],
                  [sinT, 0.0,  cosT]],
                 dtype=np.double)
    return R


@njit(cache=True, fastmath=True)
def rot_z(psi):
    """
    Transformation matrix for a rotation about the z-axis.

    Parameters
    ----------
    psi : float
        Rotation angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
    """
    sinS = np.sin(psi)
    cosS = np.cos(psi)
    R = np.array([[ cosS, sinS, 0.0],
                  [-sinS, cosS, 0.0],
                  [  0.0,  0.0, 1.0]],
                 dtype=np.double)
    return R


@njit(cache=True, fastmath=True)
def _rot_axis(axis, angle):
    if axis == 0:
        return rot_x(angle)
    elif axis == 1:
        return rot_y(angle)
    return rot_z(angle)


@njit(cache=True, fastmath=True)
def _matrix_from_angles(i0, i1, i2, angles):
    m21 = product(_rot_axis(i2, angles[2]), _rot_axis(i1, angles[1]))
    return product(m21, _rot_axis(i0, angles[0]))


@njit(cache=True, fastmath=True)
def _simple_quaternion(axis, angle):
    htheta = 0.5 * angle
    q = np.zeros(4, dtype=np.double)
    q[0] = np.cos(htheta)
    q[1 + axis] = -np.sin(htheta)
    return q


@njit(cache=True)
def _quaternion_from_angles(i0, i1, i2, angles):
    q21 = quat_multiply(_simple_quaternion(i2, angles[2]),
                        _simple_quaternion(i1, angles[1]))
    q = quat_multiply(q21, _simple_quaternion(i0, angles[0]))
    quat_normalize(q)
    return q


# Exact comparisons drive the branch selection; no fastmath here.
@njit(cache=True)
def _angles_from_matrix(trans, i0, i1, i2, alternate_x, alternate_z,
                        is_even_permutation, is_aerodynamics_sequence,
                        gimbal_lock_threshold):
    # trans[i2][i0] is sin(theta) for even aerodynamics sequences,
    # -sin(theta) for odd ones and cos(theta) for astronomical sequences.
    theta_val = trans[i2, i0]

    # sin or cos of phi and psi, each scaled by +/-cos(theta) (aerodynamics)
    # or +/-sin(theta) (astronomical).
    sin_phi = trans[i2, i1]
    cos_phi = trans[i2, alternate_z]
    sin_psi = trans[i1, i0]
    cos_psi = trans[alternate_x, i0]

    # Two estimates of the complement of theta_val, pooled.
    alt_theta_val1 = np.sqrt(sin_phi*sin_phi + cos_phi*cos_phi)
    alt_theta_val2 = np.sqrt(sin_psi*sin_psi + cos_psi*cos_psi)
    alt_theta_val = 0.5 * (alt_theta_val1 + alt_theta_val2)

    if is_aerodynamics_sequence and not is_even_permutation:
        theta_val = -theta_val

    # Take theta from whichever source is further from +/-1.
    if alt_theta_val < abs(theta_val):
        alt_theta = np.arcsin(alt_theta_val)
        if is_aerodynamics_sequence:
            if theta_val < 0.0:
                theta = -HALF_PI + alt_theta
            else:
                theta = HALF_PI - alt_theta
        else:
            if theta_val < 0.0:
                theta = np.pi - alt_theta
            else:
                theta = alt_theta
    else:
        if is_aerodynamics_sequence:
            theta = np.arcsin(theta_val)
        else:
            theta = np.arccos(theta_val)

    locked = alt_theta_val <= gimbal_lock_threshold
    if not locked:
        # Make the common scale factor positive.
        if is_aerodynamics_sequence:
            if is_even_permutation:
                sin_phi = -sin_phi
                sin_psi = -sin_psi
        else:
            if is_even_permutation:
                cos_phi = -cos_phi
            else:
                cos_psi = -cos_psi

        phi = np.arctan2(sin_phi, cos_phi)
        psi = np.arctan2(sin_psi, cos_psi)

    else:
        # Only phi+psi or phi-psi is observable; psi is pinned to zero.
        sin_phi = trans[i1, alternate_z]
        cos_phi = trans[i1, i1]
        if not is_even_permutation:
            sin_phi = -sin_phi

        phi = np.arctan2(sin_phi, cos_phi)
        psi = 0.0

    return np.array([phi, theta, psi], dtype=np.double), locked


def _lookup_euler_info(euler_sequence, location, handler):
    try:
        return get_euler_info(euler_sequence)
    except InvalidSequenceError:
        if handler is None:
            handler = get_message_handler()
        handler.error(
            location, OrientationMessages.invalid_enum,
            "The euler_sequence data member has not been set or is invalid; "
            "value=%r", euler_sequence)
        return None


def _as_array(value, shape, name):
    array = np.asarray(value, dtype=np.double)
    if array.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {array.shape}")
    return array


def _store(result, out):
    if out is None:
        return result
    out[...] = result
    return out


def compute_quaternion_from_euler_angles(euler_sequence, euler_angles, out=None,
                                         handler=None):
    """
    Compute the left transformation quaternion for an Euler sequence.

    The quaternion is the reverse-order product q2*q1*q0 of the three
    single-axis quaternions, normalized. Each single-axis quaternion has
    scalar cos(angle/2) and -sin(angle/2) on its rotation axis.

    Parameters
    ----------
    euler_sequence : EulerSequence or int
        Rotation sequence
    euler_angles : array_like, shape (3,)
        Euler angles (phi, theta, psi) in radians
    out : ndarray, shape (4,), optional
        Array to receive the quaternion
    handler : MessageHandler, optional
        Sink for diagnostics; defaults to the process-wide handler

    Returns
    -------
    q : ndarray, shape (4,) or None
        Quaternion [w, x, y, z], or None if the sequence is invalid
    """
    info = _lookup_euler_info(
        euler_sequence, f"{__name__}.compute_quaternion_from_euler_angles", handler)
    if info is None:
        return None

    angles = _as_array(euler_angles, (3,), "euler_angles")
    i0, i1, i2 = info.indices
    return _store(_quaternion_from_angles(i0, i1, i2, angles), out)


def compute_matrix_from_euler_angles(euler_sequence, euler_angles, out=None,
                                     handler=None):
    """
    Compute the transformation matrix for an Euler sequence.

    The matrix is the reverse-order product T2*T1*T0 of the three
    single-axis transformation matrices.

    Parameters
    ----------
    euler_sequence : EulerSequence or int
        Rotation sequence
    euler_angles : array_like, shape (3,)
        Euler angles (phi, theta, psi) in radians
    out : ndarray, shape (3, 3), optional
        Array to receive the matrix
    handler : MessageHandler, optional
        Sink for diagnostics; defaults to the process-wide handler

    Returns
    -------
    trans : ndarray, shape (3, 3) or None
        Transformation matrix, or None if the sequence is invalid
    """
    info = _lookup_euler_info(
        euler_sequence, f"{__name__}.compute_matrix_from_euler_angles", handler)
    if info is None:
        return None

    angles = _as_array(euler_angles, (3,), "euler_angles")
    i0, i1, i2 = info.indices
    return _store(_matrix_from_angles(i0, i1, i2, angles), out)


def compute_euler_angles_from_matrix(trans, euler_sequence, out=None, handler=None,
                                     gimbal_lock_threshold=GIMBAL_LOCK_THRESHOLD):
    """
    Extract Euler angles from a transformation matrix.

    A matrix built from an XYZ sequence has the form

        [  cos(psi)cos(theta)    ...                   ...                ]
        [ -sin(psi)cos(theta)    ...                   ...                ]
        [  sin(theta)          -cos(theta)sin(phi)   cos(theta)cos(phi)   ]

    so trans[2][0] depends on theta alone, the rest of the first column on
    theta and psi, and the rest of the bottom row on theta and phi. The same
    five key elements exist for every sequence; ``EulerInfo`` records where:

    - trans[indices[2]][indices[0]] gives theta
    - trans[indices[1]][indices[0]] and trans[alternate_x][indices[0]]
      give psi
    - trans[indices[2]][indices[1]] and trans[indices[2]][alternate_z]
      give phi

    Theta comes from asin/acos of its element, or from the magnitude of the
    four phi/psi elements when that is the better conditioned source.

    When cos(theta) (aerodynamics) or sin(theta) (astronomical) vanishes the
    four phi/psi elements vanish too and only phi+psi or phi-psi can be
    recovered. This is gimbal lock. Psi is then set to zero and phi is taken
    from trans[indices[1]][alternate_z] and trans[indices[1]][indices[1]].

    Parameters
    ----------
    trans : array_like, shape (3, 3)
        Transformation matrix, assumed orthonormal to numerical accuracy
    euler_sequence : EulerSequence or int
        Rotation sequence
    out : ndarray, shape (3,), optional
        Array to receive the angles
    handler : MessageHandler, optional
        Sink for diagnostics; defaults to the process-wide handler
    gimbal_lock_threshold : float, optional
        Gimbal lock is declared when the estimated cos(theta) or sin(theta)
        is at or below this value

    Returns
    -------
    euler_angles : ndarray, shape (3,) or None
        (phi, theta, psi) in radians, or None if the sequence is invalid.
        Theta lies in [-pi/2, pi/2] for aerodynamics sequences and in
        [0, pi] for astronomical sequences.
    """
    info = _lookup_euler_info(
        euler_sequence, f"{__name__}.compute_euler_angles_from_matrix", handler)
    if info is None:
        return None

    trans = _as_array(trans, (3, 3), "trans")
    i0, i1, i2 = info.indices
    angles, locked = _angles_from_matrix(
        trans, i0, i1, i2, info.alternate_x, info.alternate_z,
        info.is_even_permutation, info.is_aerodynamics_sequence,
        float(gimbal_lock_threshold))
    if locked:
        logger.trace("Gimbal lock in %s extraction; psi set to zero",
                     info.axis_names)
    return _store(angles, out)


def compute_euler_angles_from_quaternion(quat, euler_sequence, out=None, handler=None,
                                         gimbal_lock_threshold=GIMBAL_LOCK_THRESHOLD):
    """
    Extract Euler angles from a left transformation quaternion.

    The quaternion is normalized, converted to its transformation matrix
    and passed through ``compute_euler_angles_from_matrix``.

    Parameters
    ----------
    quat : array_like, shape (4,)
        Quaternion [w, x, y, z]
    euler_sequence : EulerSequence or int
        Rotation sequence
    out : ndarray, shape (3,), optional
        Array to receive the angles
    handler : MessageHandler, optional
        Sink for diagnostics; defaults to the process-wide handler
    gimbal_lock_threshold : float, optional
        See ``compute_euler_angles_from_matrix``

    Returns
    -------
    euler_angles : ndarray, shape (3,) or None
        (phi, theta, psi) in radians, or None if the sequence is invalid or
        the quaternion is zero
    """
    location = f"{__name__}.compute_euler_angles_from_quaternion"
    info = _lookup_euler_info(euler_sequence, location, handler)
    if info is None:
        return None

    q = _as_array(quat, (4,), "quat").copy()
    if not quat_normalize(q):
        if handler is None:
            handler = get_message_handler()
        handler.error(location, OrientationMessages.invalid_quaternion,
                      "Cannot extract Euler angles from a zero quaternion")
        return None

    return compute_euler_angles_from_matrix(
        quat2dcm(q), euler_sequence, out=out, handler=handler,
        gimbal_lock_threshold=gimbal_lock_threshold)
