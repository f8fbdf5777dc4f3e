from __future__ import annotations

import unittest


class CoupleJoinTests(unittest.TestCase):
    def test_couple_stacks_equal_shapes(self) -> None:
        from tacit_array import Array, couple

        out = couple(Array.unit(1.0), Array.unit(2.0))
        self.assertEqual(out.shape, [2])
        self.assertEqual(out.data, [1.0, 2.0])
        self.assertFalse(out.fill)

        grid = couple(Array([2, 2], [1, 2, 3, 4]), Array([2, 2], [5, 6, 7, 8]))
        self.assertEqual(grid.shape, [2, 2, 2])

    def test_join_row_append_and_concatenation(self) -> None:
        from tacit_array import Array, join

        appended = join(Array([2, 2], [1, 2, 3, 4]), Array.from_list([5, 6]))
        self.assertEqual(appended.shape, [3, 2])
        self.assertEqual(appended.data, [1, 2, 3, 4, 5, 6])

        concatenated = join(Array.from_list([1, 2]), Array.from_list([3, 4, 5]))
        self.assertEqual(concatenated.shape, [5])

        promoted = join(Array.unit(1), Array.unit(2))
        self.assertEqual(promoted.shape, [2])
        self.assertEqual(join(Array.unit(0), Array.from_list([1, 2])).data, [0, 1, 2])

    def test_mismatches_raise_attributed_errors(self) -> None:
        from tacit_array import Array, ArrayShapeError, ArrayTypeError, Context, couple, join

        ctx = Context(where="couple-site")
        with self.assertRaises(ArrayShapeError) as caught:
            couple(Array.from_list([1, 2]), Array.from_list([1]), ctx)
        self.assertIn("couple-site", str(caught.exception))

        with self.assertRaises(ArrayShapeError):
            join(Array([1, 1, 1], [1]), Array.unit(2))

        with self.assertRaises(ArrayShapeError):
            couple(Array([1, 2], [1, 2], fill=True), Array.from_list([1, 2]))

        with self.assertRaises(ArrayTypeError):
            join(Array.from_string("ab"), Array.from_list([1]))

    def test_fill_flag_is_inherited_by_result(self) -> None:
        from tacit_array import Array, couple

        left = Array([1], [1.0], fill=True)
        out = couple(left, Array([1], [2.0]))
        self.assertTrue(out.fill)


if __name__ == "__main__":
    unittest.main()
