import copy
import unittest

from fzolv.math import Vector3, Vector3f, Vector3i


class Vector3PlaceholderTests(unittest.TestCase):
    def test_default_is_zero(self) -> None:
        v = Vector3f()
        self.assertEqual((v.x, v.y, v.z), (0.0, 0.0, 0.0))
        self.assertEqual(Vector3(), Vector3(0, 0, 0))

    def test_construct_with_components(self) -> None:
        v = Vector3i(1.7, 2, -3.2)
        self.assertEqual(v, Vector3i(1, 2, -3))

    def test_copy(self) -> None:
        a = Vector3f(1.0, 2.0, 3.0)
        b = copy.copy(a)
        b.z = 9.0
        self.assertEqual(a, Vector3f(1.0, 2.0, 3.0))

    def test_move(self) -> None:
        a = Vector3f(1.0, 2.0, 3.0)
        b = Vector3f.moved(a)
        self.assertEqual(b, Vector3f(1.0, 2.0, 3.0))
        self.assertEqual(a, Vector3f())
        c = Vector3f()
        c.move_from(b)
        self.assertEqual(c, Vector3f(1.0, 2.0, 3.0))
        self.assertEqual(b, Vector3f())

    def test_has_no_arithmetic(self) -> None:
        with self.assertRaises(TypeError):
            Vector3f() + Vector3f()


if __name__ == "__main__":
    unittest.main()
