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
Euler rotation sequences.

Each of the twelve sequences is described by an ``EulerInfo`` record holding
the matrix element wiring used to build a transformation from Euler angles
and to extract the angles back out of a transformation matrix. See
``compute_euler_angles_from_matrix`` for how the fields are used.

Sequences whose three axes are distinct (XYZ, ZYX, ...) are called
aerodynamics sequences; sequences whose first and last axes coincide
(ZXZ, XYX, ...) are called astronomical sequences.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

import numpy as np

from ..core.constants import AXIS_NAMES


class InvalidSequenceError(ValueError):
    """Raised when a value does not identify one of the twelve Euler sequences"""


class EulerSequence(IntEnum):
    """Enumeration of the twelve Euler rotation sequences"""
    EulerXYZ = 0
    EulerXZY = 1
    EulerYZX = 2
    EulerYXZ = 3
    EulerZXY = 4
    EulerZYX = 5
    EulerXYX = 6
    EulerXZX = 7
    EulerYZY = 8
    EulerYXY = 9
    EulerZXZ = 10
    EulerZYZ = 11

    @classmethod
    def from_string(cls, name: str) -> "EulerSequence":
        """
        Parse a three-letter axis name such as 'ZYX' or 'zxz'.

        Raises
        ------
        ValueError
            If the name is not one of the twelve sequences
        """
        key = "Euler" + str(name).strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown Euler sequence: {name!r}") from None

    @property
    def axis_names(self) -> str:
        """Rotation axes as a string, e.g. 'ZYX'"""
        return self.name[len("Euler"):]

    @property
    def is_aerodynamics(self) -> bool:
        """True for sequences with three distinct axes"""
        return EULER_INFO[self].is_aerodynamics_sequence


@dataclass(frozen=True)
class EulerInfo:
    """
    Element wiring for one Euler sequence.

    Attributes
    ----------
    indices : tuple of int
        The axes about which the rotations are performed, in rotation order,
        with X=0, Y=1, Z=2. XYZ is (0, 1, 2) and ZXZ is (2, 0, 2).
    alternate_x : int
        The first axis of the sequence for aerodynamics sequences, the
        omitted axis for astronomical sequences (Y=1 for ZXZ).
    alternate_z : int
        The last axis of the sequence for aerodynamics sequences, the
        omitted axis for astronomical sequences.
    is_even_permutation : bool
        Whether the sequence obtained by replacing the last axis with the
        axis not named by the first two is an even permutation of XYZ.
        ZXZ becomes ZXY, an even permutation.
    is_aerodynamics_sequence : bool
        True for XYZ-style sequences, False for ZXZ-style sequences.
    """
    indices: Tuple[int, int, int]
    alternate_x: int
    alternate_z: int
    is_even_permutation: bool
    is_aerodynamics_sequence: bool

    @property
    def axis_names(self) -> str:
        return ''.join(AXIS_NAMES[axis] for axis in self.indices)


# Arranged per the values of EulerSequence.
EULER_INFO: Tuple[EulerInfo, ...] = (
    #          seq      altx altz  right  aero
    EulerInfo((0, 1, 2), 0, 2, True, True),     # EulerXYZ
    EulerInfo((0, 2, 1), 0, 1, False, True),    # EulerXZY
    EulerInfo((1, 2, 0), 1, 0, True, True),     # EulerYZX
    EulerInfo((1, 0, 2), 1, 2, False, True),    # EulerYXZ
    EulerInfo((2, 0, 1), 2, 1, True, True),     # EulerZXY
    EulerInfo((2, 1, 0), 2, 0, False, True),    # EulerZYX
    EulerInfo((0, 1, 0), 2, 2, True, False),    # EulerXYX
    EulerInfo((0, 2, 0), 1, 1, False, False),   # EulerXZX
    EulerInfo((1, 2, 1), 0, 0, True, False),    # EulerYZY
    EulerInfo((1, 0, 1), 2, 2, False, False),   # EulerYXY
    EulerInfo((2, 0, 2), 1, 1, True, False),    # EulerZXZ
    EulerInfo((2, 1, 2), 0, 0, False, False),   # EulerZYZ
)


def to_euler_sequence(value) -> EulerSequence:
    """
    Convert a sequence identifier to an EulerSequence.

    Accepts EulerSequence members and integers in [0, 11]. Floats, bools and
    strings are rejected; use ``EulerSequence.from_string`` for names.

    Raises
    ------
    InvalidSequenceError
        If the value does not identify a sequence
    """
    if isinstance(value, EulerSequence):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidSequenceError(f"Invalid Euler sequence identifier: {value!r}")
    try:
        return EulerSequence(int(value))
    except ValueError:
        raise InvalidSequenceError(f"Invalid Euler sequence identifier: {value!r}") from None


def get_euler_info(sequence) -> EulerInfo:
    """Get the element wiring for a sequence identifier"""
    return EULER_INFO[to_euler_sequence(sequence)]
