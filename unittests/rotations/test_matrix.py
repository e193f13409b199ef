from unittest import TestCase

import warnings

import numpy as np

from quatkit import rotations as rt


class TestMatrix3x3(TestCase):

    def setUp(self):

        self.values = [[1, 2, 3],
                       [0, 1, 4],
                       [5, 6, 0]]

        self.matrix = rt.Matrix3x3.from_array(self.values)

    def test_init(self):

        np.testing.assert_array_equal(np.asarray(rt.Matrix3x3()), np.zeros((3, 3)))

        np.testing.assert_array_equal(np.asarray(rt.Matrix3x3(1, 2, 3, 0, 1, 4, 5, 6, 0)), self.values)

        np.testing.assert_array_equal(np.asarray(rt.Matrix3x3.from_array([1, 2, 3, 0, 1, 4, 5, 6, 0])), self.values)

        np.testing.assert_array_equal(np.asarray(self.matrix), self.values)

        with self.assertRaises(ValueError):
            rt.Matrix3x3.from_array([1, 2, 3])

    def test_identity(self):

        identity = rt.Matrix3x3.identity()

        np.testing.assert_array_equal(np.asarray(identity), np.eye(3))

        self.assertEqual(identity.trace(), 3)
        self.assertEqual(identity.det(), 1)

    def test_coeff_set(self):

        self.assertEqual(self.matrix.coeff(0, 1), 2)
        self.assertEqual(self.matrix.coeff(2, 0), 5)

        self.matrix.set(2, 0, -7)
        self.assertEqual(self.matrix.coeff(2, 0), -7)

        self.matrix.set(1, 2)
        self.assertEqual(self.matrix.coeff(1, 2), 0)

        self.matrix.set_diagonal(1, 9)
        self.assertEqual(self.matrix.coeff(1, 1), 9)

        for r, c in [(3, 0), (0, 3), (-1, 0)]:
            with self.assertRaises(IndexError):
                self.matrix.coeff(r, c)

            with self.assertRaises(IndexError):
                self.matrix.set(r, c, 1)

        with self.assertRaises(IndexError):
            self.matrix.set_diagonal(3, 1)

    def test_trace(self):

        self.assertEqual(self.matrix.trace(), 2)

    def test_det(self):

        self.assertAlmostEqual(self.matrix.det(), 1)

        self.assertAlmostEqual(rt.Matrix3x3(2, 0, 0, 0, 3, 0, 0, 0, 4).det(), 24)

        self.assertAlmostEqual(rt.Matrix3x3.from_array(rt.rot_z(0.7) @ rt.rot_x(-1.2)).det(), 1)

        self.assertAlmostEqual(self.matrix.det(), np.linalg.det(self.values))

    def test_transpose(self):

        np.testing.assert_array_equal(np.asarray(self.matrix.transpose()), np.transpose(self.values))

        self.assertEqual(self.matrix.transpose().transpose(), self.matrix)

        np.testing.assert_array_equal(np.asarray(self.matrix), self.values)

    def test_row_col(self):

        self.assertEqual(self.matrix.row(0), rt.Vector(1, 2, 3))
        self.assertEqual(self.matrix.row(2), rt.Vector(5, 6, 0))
        self.assertEqual(self.matrix.col(0), rt.Vector(1, 0, 5))
        self.assertEqual(self.matrix.col(2), rt.Vector(3, 4, 0))

    def test_from_vectors(self):

        vx = rt.Vector(1, 2, 3)
        vy = rt.Vector(0, 1, 4)
        vz = rt.Vector(5, 6, 0)

        matrix = rt.Matrix3x3()

        self.assertIs(matrix.from_vectors(vx, vy, vz), matrix)
        self.assertEqual(matrix, self.matrix)

        matrix.from_vectors(vx, vy, vz, row=False)
        self.assertEqual(matrix, self.matrix.transpose())

        self.assertEqual(rt.Matrix3x3.merge(vx, vy, vz), self.matrix.transpose())

    def test_reset(self):

        self.matrix.reset(np.arange(9))

        np.testing.assert_array_equal(np.asarray(self.matrix), np.arange(9).reshape(3, 3))

        with self.assertRaises(ValueError):
            self.matrix.reset(np.eye(4))

    def test_mul_vector(self):

        res = self.matrix * rt.Vector(1, 1, 1)

        self.assertIsInstance(res, rt.Vector)
        self.assertEqual(res, rt.Vector(6, 5, 11))

        self.assertEqual(self.matrix @ rt.Vector(1, 0, 0), self.matrix.col(0))

        with self.assertRaises(TypeError):
            self.matrix * 'a'

        # numpy scalars do not broadcast over the matrix
        with self.assertRaises(TypeError):
            np.float64(2) * self.matrix

    def test_eq(self):

        self.assertEqual(self.matrix, rt.Matrix3x3.from_array(self.values))
        self.assertNotEqual(self.matrix, rt.Matrix3x3.identity())
        self.assertFalse(self.matrix == self.values)

    def test_copy(self):

        matrix = self.matrix.copy()

        matrix.set(0, 0, 100)

        self.assertEqual(self.matrix.coeff(0, 0), 1)

    def test_to_quaternion(self):

        quaternion = rt.Matrix3x3.from_array(rt.rot_x(np.pi / 2)).to_quaternion()

        self.assertIsInstance(quaternion, rt.Quaternion)

        np.testing.assert_array_almost_equal(np.asarray(quaternion), [np.sqrt(2) / 2, np.sqrt(2) / 2, 0, 0])

        self.assertEqual(rt.Matrix3x3.identity().to_quaternion(), rt.Quaternion())

    def test_to_quaternion_half_turn(self):

        # the direct formula divides by zero for a 180 degree rotation
        with warnings.catch_warnings():
            warnings.simplefilter('error')

            quaternion = rt.Matrix3x3(-1, 0, 0, 0, -1, 0, 0, 0, 1).to_quaternion()

        self.assertTrue(np.isnan(np.asarray(quaternion)).any())
