from unittest import TestCase

import warnings

import numpy as np

from quatkit import rotations as rt


class TestVector(TestCase):

    def check_vector(self, vector, values):

        np.testing.assert_array_almost_equal(np.asarray(vector), values)
        self.assertAlmostEqual(vector.x, values[0])
        self.assertAlmostEqual(vector.y, values[1])
        self.assertAlmostEqual(vector.z, values[2])

    def test_init(self):

        self.check_vector(rt.Vector(), [0, 0, 0])

        self.check_vector(rt.Vector(1, 2, 3), [1, 2, 3])

        self.check_vector(rt.Vector.identical(4.5), [4.5, 4.5, 4.5])

    def test_setters(self):

        vec = rt.Vector()

        vec.x = 1
        vec.y = 2
        vec.z = 3

        self.check_vector(vec, [1, 2, 3])

    def test_getitem(self):

        vec = rt.Vector(1, 2, 3)

        self.assertEqual(vec[0], 1)
        self.assertEqual(vec[2], 3)
        self.assertEqual(list(vec), [1, 2, 3])

        with self.assertRaises(IndexError):
            vec[3]

    def test_eq(self):

        self.assertEqual(rt.Vector(1, 2, 3), rt.Vector(1, 2, 3))
        self.assertNotEqual(rt.Vector(1, 2, 3), rt.Vector(1, 2, 3.5))
        self.assertFalse(rt.Vector(1, 2, 3) == [1, 2, 3])

    def test_arithmetic(self):

        vec1 = rt.Vector(1, 2, 3)
        vec2 = rt.Vector(4, 5, 6)

        self.check_vector(vec1 + vec2, [5, 7, 9])
        self.check_vector(vec1 - vec2, [-3, -3, -3])
        self.check_vector(vec1 * vec2, [4, 10, 18])
        self.check_vector(vec2 / vec1, [4, 2.5, 2])

        self.check_vector(vec1 + 1, [2, 3, 4])
        self.check_vector(vec1 - 1, [0, 1, 2])
        self.check_vector(vec1 * 2, [2, 4, 6])
        self.check_vector(vec1 / 2, [0.5, 1, 1.5])
        self.check_vector(-vec1, [-1, -2, -3])

        # scalar on the left
        self.check_vector(2 * vec1, [2, 4, 6])
        self.check_vector(1 + vec1, [2, 3, 4])
        self.check_vector(10 - vec1, [-9, -8, -7])
        self.assertEqual(10 - vec1, vec1 - 10)

        # the operands are untouched
        self.check_vector(vec1, [1, 2, 3])
        self.check_vector(vec2, [4, 5, 6])

        with self.assertRaises(TypeError):
            vec1 + 'a'

    def test_numpy_scalar_operands(self):

        vec = rt.Vector(1, 2, 3)

        for res, values in [(np.float64(2) * vec, [2, 4, 6]),
                            (np.cos(0.0) * vec, [1, 2, 3]),
                            (np.float64(1) + vec, [2, 3, 4]),
                            (np.float64(10) - vec, [-9, -8, -7]),
                            (vec * np.float64(2), [2, 4, 6]),
                            (vec / np.float64(2), [0.5, 1, 1.5])]:
            self.assertIsInstance(res, rt.Vector)
            self.check_vector(res, values)

        vec *= np.float64(3)
        self.check_vector(vec, [3, 6, 9])

        np.testing.assert_array_equal(np.asarray(vec), [3, 6, 9])

    def test_inplace(self):

        vec = rt.Vector(1, 2, 3)
        original = vec

        vec += rt.Vector(1, 1, 1)
        self.check_vector(vec, [2, 3, 4])

        vec -= rt.Vector(1, 1, 1)
        self.check_vector(vec, [1, 2, 3])

        vec *= 2
        self.check_vector(vec, [2, 4, 6])

        vec *= rt.Vector(0.5, 1, 2)
        self.check_vector(vec, [1, 4, 12])

        vec /= 2
        self.check_vector(vec, [0.5, 2, 6])

        self.assertIs(vec, original)

    def test_cross(self):

        self.check_vector(rt.Vector(1, 0, 0).cross(rt.Vector(0, 1, 0)), [0, 0, 1])
        self.check_vector(rt.Vector(0, 1, 0).cross(rt.Vector(1, 0, 0)), [0, 0, -1])
        self.check_vector(rt.Vector(1, 2, 3).cross(rt.Vector(0, 0, 1)), [2, -1, 0])

        for vec in [rt.Vector(1, 2, 3), rt.Vector(-0.5, 7, 1e3), rt.Vector()]:
            self.assertTrue(vec.cross(vec).is_nil())

    def test_dot(self):

        vec1 = rt.Vector(1, 2, 3)
        vec2 = rt.Vector(4, 5, 6)

        # only the x and y terms are included
        self.assertEqual(vec1.dot(vec2), 14)

        self.assertEqual(vec1.inner(vec2), 32)

        self.assertAlmostEqual(vec1.inner(vec1), vec1.norm_sqr())

    def test_norm(self):

        vec = rt.Vector(3, 4, 0)

        self.assertAlmostEqual(vec.norm_sqr(), 25)
        self.assertAlmostEqual(vec.norm(), 5)

        self.check_vector(vec.normalised(), [0.6, 0.8, 0])
        self.check_vector(vec, [3, 4, 0])

        self.assertIs(vec.normalise(), vec)
        self.check_vector(vec, [0.6, 0.8, 0])

    def test_normalise_zero(self):

        vec = rt.Vector()

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            vec.normalise()

            self.assertTrue(np.isnan(np.asarray(vec)).all())

            self.assertTrue(np.isinf(np.asarray(rt.Vector(1, -1, 0) / 0)[:2]).all())

    def test_is_nil(self):

        self.assertTrue(rt.Vector().is_nil())
        self.assertFalse(rt.Vector(0, 0, 1e-300).is_nil())

    def test_is_nan(self):

        vec = rt.Vector(1, 2, 3)

        self.assertFalse(vec.is_nan())

        vec.y = np.nan

        self.assertTrue(vec.is_nan())

        self.assertTrue(rt.Vector().set_nan().is_nan())
        self.assertTrue(rt.Vector().set_undefined().is_nan())

    def test_no_zeros(self):

        vec = rt.Vector(0, 2, 0)

        self.assertIs(vec.no_zeros(), vec)

        self.check_vector(vec, [1, 2, 1])

        self.check_vector(rt.Vector(-0.0, 0.5, -3).no_zeros(), [1, 0.5, -3])

    def test_clear(self):

        vec = rt.Vector(1, 2, 3)

        vec.clear()

        self.assertTrue(vec.is_nil())

    def test_elementwise(self):

        vec = rt.Vector(1, -2, 3)

        self.assertEqual(vec.sum(), 2)
        self.check_vector(vec.power(2), [1, 4, 9])
        self.check_vector(vec.absf(), [1, 2, 3])
        self.check_vector(rt.Vector(1, 4, 9).sqrt(), [1, 2, 3])

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            self.assertTrue(np.isnan(vec.sqrt().y))

    def test_quaternion_product(self):

        vec = rt.Vector(1, 2, 3)
        quaternion = rt.Quaternion.from_angles(0.1, -0.4, 2.0)

        res = vec * quaternion

        self.assertIsInstance(res, rt.Quaternion)

        self.assertEqual(res, quaternion * vec)

    def test_copy(self):

        vec = rt.Vector(1, 2, 3)
        vec2 = vec.copy()

        vec2.x = 5

        self.check_vector(vec, [1, 2, 3])
