import unittest
import numpy as np
from pyattitude.attitude.euler import (
    compute_euler_angles_from_matrix, compute_matrix_from_euler_angles,
    compute_quaternion_from_euler_angles
)
from pyattitude.attitude.orientation import DataSource, Orientation
from pyattitude.attitude.sequence import EulerSequence
from pyattitude.attitude.wrap import wrap_euler_angles
from pyattitude.core.messages import MessageHandler, OrientationMessages


class RecordingHandler(MessageHandler):

    def __init__(self):
        super().__init__()
        self.messages = []

    def process_message(self, severity, location, category, message):
        self.messages.append((severity, location, category, message))


class TestOrientation(unittest.TestCase):

    def setUp(self):
        self.handler = RecordingHandler()
        self.ori = Orientation(handler=self.handler)
        self.angles = np.array([0.3, 0.5, 1.2])

    def test_starts_at_identity(self):
        np.testing.assert_array_equal(self.ori.compute_matrix(), np.eye(3))
        np.testing.assert_allclose(self.ori.compute_quaternion(), [1.0, 0.0, 0.0, 0.0])
        np.testing.assert_allclose(self.ori.compute_euler_angles(), np.zeros(3))
        self.assertEqual(self.ori.data_source, DataSource.MATRIX)

    def test_set_euler_angles(self):
        self.assertTrue(self.ori.set_euler_angles(EulerSequence.EulerZXZ, self.angles))
        self.assertEqual(self.ori.data_source, DataSource.EULER_ANGLES)
        self.assertIs(self.ori.euler_sequence, EulerSequence.EulerZXZ)
        np.testing.assert_allclose(
            self.ori.compute_matrix(),
            compute_matrix_from_euler_angles(EulerSequence.EulerZXZ, self.angles))
        np.testing.assert_allclose(
            self.ori.compute_quaternion(),
            compute_quaternion_from_euler_angles(EulerSequence.EulerZXZ, self.angles))
        np.testing.assert_array_equal(self.ori.compute_euler_angles(), self.angles)

    def test_euler_angles_in_other_sequence(self):
        self.ori.set_euler_angles(EulerSequence.EulerXYZ, self.angles)
        zyx = self.ori.compute_euler_angles(EulerSequence.EulerZYX)
        np.testing.assert_allclose(
            compute_matrix_from_euler_angles(EulerSequence.EulerZYX, zyx),
            self.ori.compute_matrix(), atol=1e-12)

    def test_set_matrix(self):
        trans = compute_matrix_from_euler_angles(EulerSequence.EulerYXY, self.angles)
        self.assertTrue(self.ori.set_matrix(trans))
        self.assertIsNone(self.ori.euler_sequence)
        np.testing.assert_allclose(self.ori.compute_euler_angles(EulerSequence.EulerYXY),
                                   self.angles, atol=1e-9)
        q = compute_quaternion_from_euler_angles(EulerSequence.EulerYXY, self.angles)
        q2 = self.ori.compute_quaternion()
        np.testing.assert_allclose(q2 * np.sign(np.dot(q, q2)), q, atol=1e-12)

    def test_negative_symmetric_theta_extracts_canonical_triple(self):
        angles = np.array([0.3, -0.5, 1.2])
        trans = compute_matrix_from_euler_angles(EulerSequence.EulerYXY, angles)
        self.ori.set_matrix(trans)
        extracted = self.ori.compute_euler_angles(EulerSequence.EulerYXY)
        np.testing.assert_allclose(extracted,
                                   wrap_euler_angles(EulerSequence.EulerYXY, angles), atol=1e-9)
        np.testing.assert_allclose(extracted, [0.3 - np.pi, 0.5, 1.2 - np.pi], atol=1e-9)

    def test_stored_angles_are_wrapped(self):
        for seq, angles in [(EulerSequence.EulerXYZ, [0.2, 2.0, -0.3]),
                            (EulerSequence.EulerZXZ, [0.1, -0.2, 0.3]),
                            (EulerSequence.EulerZYX, [7.0, 0.4, -4.0])]:
            self.ori.set_euler_angles(seq, angles)
            stored = self.ori.compute_euler_angles(seq)
            extracted = compute_euler_angles_from_matrix(self.ori.compute_matrix(), seq)
            np.testing.assert_allclose(stored, extracted, atol=1e-9)
            np.testing.assert_allclose(stored, wrap_euler_angles(seq, angles), atol=1e-15)

    def test_set_quaternion_normalizes(self):
        q = compute_quaternion_from_euler_angles(EulerSequence.EulerXZY, self.angles)
        self.assertTrue(self.ori.set_quaternion(2.0 * q))
        self.assertEqual(self.ori.data_source, DataSource.QUATERNION)
        np.testing.assert_allclose(self.ori.compute_quaternion(), q, atol=1e-15)
        np.testing.assert_allclose(self.ori.compute_euler_angles(EulerSequence.EulerXZY),
                                   self.angles, atol=1e-9)

    def test_zero_quaternion_rejected(self):
        self.ori.set_euler_angles(EulerSequence.EulerXYZ, self.angles)
        self.assertFalse(self.ori.set_quaternion(np.zeros(4)))
        self.assertEqual(self.ori.data_source, DataSource.EULER_ANGLES)
        self.assertEqual(len(self.handler.messages), 1)
        self.assertEqual(self.handler.messages[0][2], OrientationMessages.invalid_quaternion)

    def test_invalid_sequence_rejected(self):
        self.ori.set_euler_angles(EulerSequence.EulerXYZ, self.angles)
        before = self.ori.compute_matrix()
        self.assertFalse(self.ori.set_euler_angles(12, self.angles))
        np.testing.assert_array_equal(self.ori.compute_matrix(), before)
        self.assertIsNone(self.ori.compute_euler_angles(-3))
        self.assertEqual(len(self.handler.messages), 2)
        for message in self.handler.messages:
            self.assertEqual(message[2], OrientationMessages.invalid_enum)

    def test_transform_vector(self):
        self.ori.set_euler_angles(EulerSequence.EulerZYX, self.angles)
        v = np.array([1.0, 2.0, -3.0])
        np.testing.assert_allclose(self.ori.transform_vector(v), self.ori.compute_matrix() @ v)

    def test_shape_errors(self):
        with self.assertRaises(ValueError):
            self.ori.set_matrix(np.eye(2))
        with self.assertRaises(ValueError):
            self.ori.set_quaternion([1.0, 0.0, 0.0])

    def test_returns_copies(self):
        m = self.ori.compute_matrix()
        m[0, 0] = 5.0
        np.testing.assert_array_equal(self.ori.compute_matrix(), np.eye(3))


if __name__ == '__main__':
    unittest.main()
