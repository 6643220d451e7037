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

"""Attitude holder keeping one orientation in several representations"""

from enum import Enum

import numpy as np

from ..core.messages import OrientationMessages, get_message_handler
from .euler import (
    compute_euler_angles_from_matrix,
    compute_matrix_from_euler_angles,
    compute_quaternion_from_euler_angles,
)
from .matrix3x3 import identity, transform
from .quaternion import dcm2quat, quat2dcm, quat_normalize
from .sequence import EulerSequence
from .wrap import wrap_euler_angles


class DataSource(Enum):
    """Representation the current attitude was set from"""
    MATRIX = "matrix"
    QUATERNION = "quaternion"
    EULER_ANGLES = "euler_angles"


class Orientation:
    """
    Attitude expressed as a transformation matrix, quaternion or Euler angles.

    One representation is set and the others are derived on demand through
    the Euler conversions. The holder starts at the identity attitude.
    Setters return False, and leave the holder unchanged, when the input is
    rejected; the rejection is reported through the message handler.

    Parameters
    ----------
    handler : MessageHandler, optional
        Sink for diagnostics; defaults to the process-wide handler

    Examples
    --------
    >>> ori = Orientation()
    >>> ori.set_euler_angles(EulerSequence.EulerZYX, [0.3, 0.2, 0.1])
    True
    >>> angles = ori.compute_euler_angles(EulerSequence.EulerXYZ)
    """

    def __init__(self, handler=None):
        self.handler = handler
        self.data_source = DataSource.MATRIX
        self._trans = identity()
        self._quat = None
        self._euler_sequence = None
        self._euler_angles = None

    def set_matrix(self, trans) -> bool:
        """Set the attitude from a transformation matrix"""
        trans = np.array(trans, dtype=np.double)
        if trans.shape != (3, 3):
            raise ValueError(f"trans must have shape (3, 3), got {trans.shape}")
        self._trans = trans
        self._quat = None
        self._euler_sequence = None
        self._euler_angles = None
        self.data_source = DataSource.MATRIX
        return True

    def set_quaternion(self, quat) -> bool:
        """Set the attitude from a left transformation quaternion"""
        quat = np.array(quat, dtype=np.double)
        if quat.shape != (4,):
            raise ValueError(f"quat must have shape (4,), got {quat.shape}")
        if not quat_normalize(quat):
            handler = self.handler if self.handler is not None else get_message_handler()
            handler.error(f"{__name__}.Orientation.set_quaternion",
                          OrientationMessages.invalid_quaternion,
                          "Cannot set the attitude from a zero quaternion")
            return False
        self._trans = quat2dcm(quat)
        self._quat = quat
        self._euler_sequence = None
        self._euler_angles = None
        self.data_source = DataSource.QUATERNION
        return True

    def set_euler_angles(self, euler_sequence, euler_angles) -> bool:
        """Set the attitude from an Euler sequence and angles.

        The angles are kept wrapped to the canonical ranges of the sequence.
        """
        trans = compute_matrix_from_euler_angles(
            euler_sequence, euler_angles, handler=self.handler)
        if trans is None:
            return False
        self._trans = trans
        self._quat = compute_quaternion_from_euler_angles(
            euler_sequence, euler_angles, handler=self.handler)
        self._euler_sequence = EulerSequence(euler_sequence)
        self._euler_angles = wrap_euler_angles(self._euler_sequence, euler_angles)
        self.data_source = DataSource.EULER_ANGLES
        return True

    @property
    def euler_sequence(self):
        """Sequence of the Euler angles last set, or None"""
        return self._euler_sequence

    def compute_matrix(self) -> np.ndarray:
        """Transformation matrix of the current attitude"""
        return self._trans.copy()

    def compute_quaternion(self) -> np.ndarray:
        """Left transformation quaternion of the current attitude"""
        if self._quat is None:
            self._quat = dcm2quat(self._trans)
        return self._quat.copy()

    def compute_euler_angles(self, euler_sequence=None):
        """
        Euler angles of the current attitude.

        Parameters
        ----------
        euler_sequence : EulerSequence or int, optional
            Sequence to extract; defaults to the sequence last set, or XYZ

        Returns
        -------
        ndarray, shape (3,) or None
            (phi, theta, psi), or None if the sequence is invalid. Angles
            are in the ranges of ``wrap_euler_angles`` whether they come
            from the angles last set or from the matrix.
        """
        if euler_sequence is None:
            euler_sequence = (self._euler_sequence if self._euler_sequence is not None
                              else EulerSequence.EulerXYZ)
        if (self._euler_sequence is not None
                and isinstance(euler_sequence, (int, np.integer))
                and not isinstance(euler_sequence, bool)
                and euler_sequence == self._euler_sequence):
            return self._euler_angles.copy()
        return compute_euler_angles_from_matrix(
            self._trans, euler_sequence, handler=self.handler)

    def transform_vector(self, vec) -> np.ndarray:
        """Express a vector given in the parent frame in the rotated frame"""
        vec = np.asarray(vec, dtype=np.double)
        return transform(self._trans, vec)
