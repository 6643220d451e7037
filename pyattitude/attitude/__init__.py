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
Attitude module for conversions between attitude representations.

This module provides functions for converting between:
- Euler angles under any of the twelve rotation sequences
- Direction Cosine Matrices (DCM), as transformation matrices
- Quaternions, as left transformation quaternions [w, x, y, z]

Rotations compose in reverse order: the matrix of the sequence (a0, a1, a2)
with angles (phi, theta, psi) is T_a2(psi) * T_a1(theta) * T_a0(phi).
Extracting Euler angles from a matrix handles gimbal lock by pinning the
third angle to zero.

References:
    JSC Engineering Orbital Dynamics, Orientation model documentation
"""

from .euler import (
    compute_euler_angles_from_matrix,
    compute_euler_angles_from_quaternion,
    compute_matrix_from_euler_angles,
    compute_quaternion_from_euler_angles,
    rot_x,
    rot_y,
    rot_z,
)
from .matrix3x3 import is_orthonormal, orthonormalize
from .orientation import DataSource, Orientation
from .quaternion import dcm2quat, quat2dcm, quat_conjugate, quat_multiply, quat_norm, quat_normalize
from .sequence import EULER_INFO, EulerInfo, EulerSequence, InvalidSequenceError, get_euler_info
from .wrap import wrap_euler_angles, wrapTo2Pi, wrapToPi

__all__ = [
    'EulerSequence', 'EulerInfo', 'EULER_INFO', 'InvalidSequenceError', 'get_euler_info',
    'compute_quaternion_from_euler_angles', 'compute_matrix_from_euler_angles',
    'compute_euler_angles_from_matrix', 'compute_euler_angles_from_quaternion',
    'rot_x', 'rot_y', 'rot_z',
    'quat_multiply', 'quat_normalize', 'quat_norm', 'quat_conjugate', 'quat2dcm', 'dcm2quat',
    'is_orthonormal', 'orthonormalize',
    'wrapTo2Pi', 'wrapToPi', 'wrap_euler_angles',
    'Orientation', 'DataSource',
]
