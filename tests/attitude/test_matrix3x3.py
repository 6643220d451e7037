import unittest
import numpy as np
from pyattitude.attitude.euler import compute_matrix_from_euler_angles
from pyattitude.attitude.matrix3x3 import (
    determinant, identity, initialize, is_orthonormal, orthonormalize,
    product, transform, transpose
)
from pyattitude.attitude.sequence import EulerSequence


class TestMatrix3x3(unittest.TestCase):

    def setUp(self):
        self.a = np.arange(1.0, 10.0).reshape(3, 3)
        self.b = np.array([[2.0, -1.0, 0.5], [0.0, 3.0, 1.0], [4.0, 0.0, -2.0]])
        self.rot = compute_matrix_from_euler_angles(EulerSequence.EulerZYZ, [0.3, 1.1, -0.7])

    def test_initialize(self):
        m = self.a.copy()
        initialize(m)
        np.testing.assert_array_equal(m, np.zeros((3, 3)))

    def test_identity(self):
        np.testing.assert_array_equal(identity(), np.eye(3))

    def test_product(self):
        np.testing.assert_allclose(product(self.a, self.b), self.a @ self.b)
        np.testing.assert_allclose(product(self.b, self.a), self.b @ self.a)

    def test_transpose(self):
        np.testing.assert_array_equal(transpose(self.a), self.a.T)

    def test_transform(self):
        v = np.array([1.0, -2.0, 0.5])
        np.testing.assert_allclose(transform(self.b, v), self.b @ v)

    def test_determinant(self):
        self.assertAlmostEqual(determinant(self.b), np.linalg.det(self.b), places=12)
        self.assertAlmostEqual(determinant(self.rot), 1.0, places=12)

    def test_is_orthonormal(self):
        self.assertTrue(is_orthonormal(self.rot))
        self.assertTrue(is_orthonormal(np.eye(3)))
        self.assertFalse(is_orthonormal(2.0 * self.rot))
        self.assertFalse(is_orthonormal(np.diag([1.0, 1.0, -1.0])))
        self.assertFalse(is_orthonormal(np.eye(2)))

    def test_orthonormalize(self):
        noisy = self.rot + 1e-6 * np.random.default_rng(3).standard_normal((3, 3))
        self.assertFalse(is_orthonormal(noisy))
        fixed = orthonormalize(noisy)
        self.assertTrue(is_orthonormal(fixed))
        np.testing.assert_allclose(fixed, self.rot, atol=1e-5)

    def test_orthonormalize_rejects_reflection(self):
        with self.assertRaises(ValueError):
            orthonormalize(np.diag([1.0, 1.0, -1.0]))
        with self.assertRaises(ValueError):
            orthonormalize(np.eye(4))


if __name__ == '__main__':
    unittest.main()
