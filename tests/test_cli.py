import contextlib
import io
import unittest

from rationals.__main__ import demo_checks, main


def run(argv):
    stdout = io.StringIO()
    with contextlib.redirect_stdout(stdout):
        code = main(argv)
    return code, stdout.getvalue()


class DemoTests(unittest.TestCase):
    def test_all_checks_pass(self):
        for label, result in demo_checks():
            with self.subTest(label=label):
                self.assertTrue(result)

    def test_demo_prints_true_lines(self):
        code, output = run(["demo"])
        self.assertEqual(code, 0)
        lines = output.splitlines()
        self.assertEqual(len(lines), len(demo_checks()))
        self.assertEqual(set(lines), {"True"})

    def test_demo_labels(self):
        code, output = run(["demo", "--labels"])
        self.assertEqual(code, 0)
        self.assertIn("True\t1/2 < 2/3", output.splitlines())


class EvalTests(unittest.TestCase):
    def test_arithmetic(self):
        self.assertEqual(run(["eval", "1/2", "+", "1/3"]), (0, "5/6\n"))
        self.assertEqual(run(["eval", "1/2", "/", "1/3"]), (0, "3/2\n"))

    def test_comparison(self):
        self.assertEqual(run(["eval", "1/2", "<", "2/3"]), (0, "True\n"))

    def test_errors_return_non_zero(self):
        with self.assertLogs("rationals.__main__", level="ERROR"):
            code, output = run(["eval", "1/2", "/", "0"])
        self.assertEqual(code, 2)
        self.assertEqual(output, "")

        with self.assertLogs("rationals.__main__", level="ERROR"):
            code, _ = run(["eval", "1/x", "+", "1"])
        self.assertEqual(code, 2)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
