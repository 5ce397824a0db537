import unittest

from rationals import InvalidFormat, Rational, RationalError, parse


class InvalidFormatTests(unittest.TestCase):
    def test_too_many_parts(self):
        for text in ("1/2/3", "1//2", "//"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidFormat):
                    parse(text)

    def test_bad_tokens(self):
        for text in ("", "/", "a", "1/b", "1.5", "1/2.0", " 1", "1 /2", "-", "1_000", "0x10"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidFormat):
                    parse(text)

    def test_error_hierarchy(self):
        with self.assertRaises(ValueError):
            parse("x/y")
        with self.assertRaises(RationalError):
            parse("1/2/3")

    def test_non_string_input(self):
        with self.assertRaises(TypeError):
            Rational.from_str(12)


class ValidFormatTests(unittest.TestCase):
    def test_signs(self):
        value = parse("-3/+9")
        self.assertEqual((value.numerator, value.denominator), (-3, 9))
        self.assertEqual(str(value), "-1/3")

    def test_leading_zeros(self):
        value = parse("007/010")
        self.assertEqual((value.numerator, value.denominator), (7, 10))

    def test_large_values(self):
        text = "912016490186296920119201192141970416029/1824032980372593840238402384283940832058"
        value = parse(text)
        self.assertEqual(value.numerator, 912016490186296920119201192141970416029)
        self.assertEqual(str(value), "1/2")


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
