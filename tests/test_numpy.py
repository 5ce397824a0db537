import unittest
from fractions import Fraction

import numpy as np

from rationals import Rational, as_rational_array, zeros, zeros_like


class NumpyInteropTests(unittest.TestCase):
    def test_array_operations_with_scalar(self):
        vector = np.array([1, 2, 3])
        result = Rational(1, 4) + vector
        self.assertEqual(result.dtype, object)
        self.assertTrue(all(isinstance(item, Rational) for item in result))
        np.testing.assert_allclose([float(item) for item in result], [1.25, 2.25, 3.25])

    def test_reflected_array_operations(self):
        vector = np.array([1, 2])
        result = Rational(1, 2).__rsub__(vector)
        self.assertEqual([str(item) for item in result], ["1/2", "3/2"])

    def test_object_array_operations(self):
        vector = np.array([Rational(1, 2), Rational(1, 3)], dtype=object)
        result = vector + Rational(1, 6)
        self.assertEqual([str(item) for item in result], ["2/3", "1/2"])

    def test_ufunc_support(self):
        vector = np.array([Rational(1, 2), Rational(3, 4)], dtype=object)
        result = np.add(vector, Rational(1, 4))
        np.testing.assert_allclose([float(item) for item in result], [0.75, 1.0])

        result = np.multiply(Rational(2, 3), np.array([3, 6]))
        self.assertEqual([str(item) for item in result], ["2", "4"])

    def test_scalar_ufunc(self):
        result = np.negative(Rational(1, 2))
        self.assertIsInstance(result, Rational)
        self.assertEqual(str(result), "-1/2")

    def test_numpy_integer_scalars(self):
        value = Rational(np.int64(3), np.int32(6))
        self.assertEqual((value.numerator, value.denominator), (3, 6))
        self.assertEqual(Rational(1, 2) + np.int64(1), Rational(3, 2))

    def test_rational_array_helpers(self):
        arr = zeros(4)
        self.assertEqual(arr.shape, (4,))
        self.assertTrue(all(isinstance(item, Rational) for item in arr))

        base = [Rational(1, 2), 3, Fraction(3, 4)]
        arr_from_list = as_rational_array(base)
        self.assertEqual(arr_from_list.shape, (3,))
        self.assertEqual([str(item) for item in arr_from_list], ["1/2", "3", "3/4"])

        arr_like = zeros_like(np.array([[1, 2], [3, 4]]))
        self.assertEqual(arr_like.shape, (2, 2))
        self.assertTrue(all(float(item) == 0.0 for item in arr_like.flat))

    def test_as_rational_array_without_copy(self):
        arr = zeros(2)
        self.assertIs(as_rational_array(arr, copy=False), arr)
        self.assertIsNot(as_rational_array(arr), arr)

    def test_float_arrays_rejected(self):
        with self.assertRaises(TypeError):
            as_rational_array([0.5])
        with self.assertRaises(ValueError):
            zeros(-1)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
