from __future__ import annotations

import importlib.util
import unittest

from relaxed_json.parser import parse


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


class ShapeTests(unittest.TestCase):
    @unittest.skipUnless(JAX_AVAILABLE, "jax is required for interop tests")
    def test_shape_of_rectangular_and_ragged_trees(self) -> None:
        from relaxed_json.interop import shape_of

        self.assertEqual(shape_of(parse("3")), ())
        self.assertEqual(shape_of(parse("[]")), (0,))
        self.assertEqual(shape_of(parse("[[1,2,3],[4,5,6]]")), (2, 3))
        with self.assertRaises(TypeError):
            shape_of(parse("[[1,2],[3]]"))
        with self.assertRaises(TypeError):
            shape_of(parse("[1,'x']"))
        with self.assertRaises(TypeError):
            shape_of(parse("{a:1}"))


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for interop tests")
class JaxInteropTests(unittest.TestCase):
    def test_numeric_matrix_converts(self) -> None:
        from relaxed_json import to_jax_array

        arr = to_jax_array(parse("[[1,2,3],[4,5,6]]"))
        self.assertEqual(tuple(arr.shape), (2, 3))
        self.assertEqual(arr.tolist(), [[1, 2, 3], [4, 5, 6]])

    def test_mixed_numbers_promote_to_float(self) -> None:
        from relaxed_json import to_jax_array

        arr = to_jax_array(parse("[1, 2.5, 0x3]"))
        self.assertEqual(arr.tolist(), [1.0, 2.5, 3.0])

    def test_non_numeric_is_rejected(self) -> None:
        from relaxed_json import to_jax_array

        with self.assertRaises(TypeError):
            to_jax_array(parse("['a','b']"))


if __name__ == "__main__":
    unittest.main()
