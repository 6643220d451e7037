#!/usr/bin/env python3
"""Test suite for the Euler sequence table"""

import dataclasses
import unittest

import numpy as np
from pyattitude.attitude.sequence import (
    EULER_INFO, EulerInfo, EulerSequence, InvalidSequenceError,
    get_euler_info, to_euler_sequence
)


def permutation_is_even(axes):
    """Parity of a permutation of (0, 1, 2)"""
    inversions = sum(1 for i in range(3) for j in range(i + 1, 3) if axes[i] > axes[j])
    return inversions % 2 == 0


class TestEulerInfoTable(unittest.TestCase):
    """Test the element wiring of each sequence"""

    EXPECTED = {
        EulerSequence.EulerXYZ: ((0, 1, 2), 0, 2, True, True),
        EulerSequence.EulerXZY: ((0, 2, 1), 0, 1, False, True),
        EulerSequence.EulerYZX: ((1, 2, 0), 1, 0, True, True),
        EulerSequence.EulerYXZ: ((1, 0, 2), 1, 2, False, True),
        EulerSequence.EulerZXY: ((2, 0, 1), 2, 1, True, True),
        EulerSequence.EulerZYX: ((2, 1, 0), 2, 0, False, True),
        EulerSequence.EulerXYX: ((0, 1, 0), 2, 2, True, False),
        EulerSequence.EulerXZX: ((0, 2, 0), 1, 1, False, False),
        EulerSequence.EulerYZY: ((1, 2, 1), 0, 0, True, False),
        EulerSequence.EulerYXY: ((1, 0, 1), 2, 2, False, False),
        EulerSequence.EulerZXZ: ((2, 0, 2), 1, 1, True, False),
        EulerSequence.EulerZYZ: ((2, 1, 2), 0, 0, False, False),
    }

    def test_twelve_entries(self):
        self.assertEqual(len(EULER_INFO), 12)
        self.assertEqual(len(EulerSequence), 12)
        self.assertEqual([int(seq) for seq in EulerSequence], list(range(12)))

    def test_table_values(self):
        for seq, expected in self.EXPECTED.items():
            info = EULER_INFO[seq]
            actual = (info.indices, info.alternate_x, info.alternate_z,
                      info.is_even_permutation, info.is_aerodynamics_sequence)
            self.assertEqual(actual, expected, msg=seq.name)

    def test_names_match_indices(self):
        for seq in EulerSequence:
            self.assertEqual(EULER_INFO[seq].axis_names, seq.axis_names)

    def test_aerodynamics_alternates_are_ends(self):
        for info in EULER_INFO[:6]:
            self.assertEqual(info.alternate_x, info.indices[0])
            self.assertEqual(info.alternate_z, info.indices[2])
            self.assertEqual(info.is_even_permutation, permutation_is_even(info.indices))

    def test_astronomical_alternates_are_omitted_axis(self):
        for info in EULER_INFO[6:]:
            self.assertEqual(info.indices[0], info.indices[2])
            omitted = 3 - info.indices[0] - info.indices[1]
            self.assertEqual(info.alternate_x, omitted)
            self.assertEqual(info.alternate_z, omitted)
            replaced = (info.indices[0], info.indices[1], omitted)
            self.assertEqual(info.is_even_permutation, permutation_is_even(replaced))

    def test_table_is_immutable(self):
        info = EULER_INFO[EulerSequence.EulerZXZ]
        with self.assertRaises(dataclasses.FrozenInstanceError):
            info.alternate_x = 0
        with self.assertRaises(TypeError):
            EULER_INFO[0] = EulerInfo((2, 1, 0), 2, 0, False, True)


class TestSequenceLookup(unittest.TestCase):
    """Test sequence identifier validation"""

    def test_get_euler_info_accepts_enum_and_int(self):
        self.assertIs(get_euler_info(EulerSequence.EulerZYX), EULER_INFO[5])
        self.assertIs(get_euler_info(5), EULER_INFO[5])
        self.assertIs(get_euler_info(np.int64(10)), EULER_INFO[10])

    def test_invalid_identifiers(self):
        for value in (-1, 12, 100, 3.0, True, "XYZ", None, [0, 1, 2]):
            with self.assertRaises(InvalidSequenceError, msg=repr(value)):
                to_euler_sequence(value)

    def test_invalid_sequence_error_is_value_error(self):
        with self.assertRaises(ValueError):
            get_euler_info(12)

    def test_from_string(self):
        self.assertIs(EulerSequence.from_string("ZYX"), EulerSequence.EulerZYX)
        self.assertIs(EulerSequence.from_string(" zxz "), EulerSequence.EulerZXZ)
        with self.assertRaises(ValueError):
            EulerSequence.from_string("XXY")

    def test_is_aerodynamics(self):
        self.assertTrue(EulerSequence.EulerYXZ.is_aerodynamics)
        self.assertFalse(EulerSequence.EulerYXY.is_aerodynamics)


if __name__ == '__main__':
    unittest.main()
