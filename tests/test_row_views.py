from __future__ import annotations

import unittest


def _matrix():
    from tacit_array import Array

    return Array([3, 2], [1, 2, 3, 4, 5, 6])


class RowViewTests(unittest.TestCase):
    def test_row_is_a_window_into_storage(self) -> None:
        arr = _matrix()
        self.assertEqual(list(arr.row(1)), [3, 4])
        arr.data[2] = 30
        self.assertEqual(list(arr.row(1)), [30, 4])

    def test_row_out_of_range_raises(self) -> None:
        arr = _matrix()
        with self.assertRaises(IndexError):
            arr.row(3)
        with self.assertRaises(IndexError):
            arr.row(-1)

    def test_rows_are_restartable_and_reversible(self) -> None:
        arr = _matrix()
        rows = arr.rows()
        self.assertEqual(len(rows), 3)
        first_pass = [list(row) for row in rows]
        second_pass = [list(row) for row in rows]
        self.assertEqual(first_pass, [[1, 2], [3, 4], [5, 6]])
        self.assertEqual(first_pass, second_pass)
        self.assertEqual([row.index for row in reversed(rows)], [2, 1, 0])
        self.assertEqual(list(rows[-1]), [5, 6])

    def test_row_view_shape_and_copy(self) -> None:
        from tacit_array import Array

        cube = Array([2, 2, 2], list(range(8)))
        row = cube.rows()[1]
        self.assertEqual(row.shape, (2, 2))
        self.assertEqual(row.rank(), 2)
        self.assertEqual(row.flat_len(), 4)
        owned = row.to_array()
        self.assertEqual(owned.shape, [2, 2])
        self.assertEqual(owned.data, [4, 5, 6, 7])
        owned.data[0] = 99
        self.assertEqual(cube.data[4], 4)

    def test_row_equality_and_order(self) -> None:
        from tacit_array import Array

        arr = Array([3, 2], [1, 2, 1, 2, 1, 3])
        a, b, c = arr.rows()
        self.assertEqual(a, b)
        self.assertLess(b, c)
        self.assertGreater(c, a)
        # Ties are broken by the owning arrays' flat lengths.
        other = Array([1, 2], [1, 2])
        self.assertGreater(a, other.rows()[0])

    def test_rows_mut_writes_through(self) -> None:
        arr = _matrix()
        for row in arr.rows_mut():
            row[0] = row[0] * 10
        self.assertEqual(arr.data, [10, 2, 30, 4, 50, 6])

    def test_into_rows_drains_front_to_back(self) -> None:
        from tacit_array import Array

        arr = _matrix()
        rows = list(arr.into_rows())
        self.assertEqual([r.data for r in rows], [[1, 2], [3, 4], [5, 6]])
        self.assertTrue(all(r.shape == [2] for r in rows))
        self.assertEqual(arr.shape, [0])
        self.assertEqual(arr.data, [])

        scalar = Array.unit(7.0)
        (only,) = list(scalar.into_rows())
        self.assertEqual(only.shape, [])
        self.assertEqual(only.data, [7.0])

    def test_into_rows_rev_matches_forward_rows(self) -> None:
        from tacit_array import Array

        cases = [
            Array([3, 2], [1, 2, 3, 4, 5, 6]),
            Array([4], [1, 2, 3, 4]),
            Array([2, 0], []),
            Array.unit(1.0),
            Array.from_lines(["ab", "c"]),
        ]
        for arr in cases:
            with self.subTest(arr=str(arr)):
                forward = list(arr.copy().into_rows())
                backward = list(arr.into_rows_rev())
                self.assertEqual(list(reversed(backward)), forward)
                self.assertEqual([r.shape for r in reversed(backward)], [r.shape for r in forward])

    def test_rebuild_from_rows_round_trips(self) -> None:
        from tacit_array import Array

        cases = [
            Array([3, 2], [1, 2, 3, 4, 5, 6]),
            Array([2, 2, 2], list(range(8))),
            Array([5], [5, 4, 3, 2, 1]),
        ]
        for arr in cases:
            with self.subTest(arr=str(arr)):
                shape, data = list(arr.shape), list(arr.data)
                rebuilt = Array.from_row_arrays(arr.into_rows(), False)
                self.assertEqual(rebuilt.shape, shape)
                self.assertEqual(rebuilt.data, data)

    def test_from_row_arrays_concrete_scenarios(self) -> None:
        from tacit_array import Array

        empty = Array.from_row_arrays([], False)
        self.assertEqual(empty.shape, [0])
        self.assertEqual(empty.data, [])

        single = Array.from_row_arrays([Array.from_list([1, 2, 3])], False)
        self.assertEqual(single.shape, [1, 3])
        self.assertEqual(single.data, [1, 2, 3])

        pair = Array.from_row_arrays([Array.from_list([1, 2, 3]), Array.from_list([4, 5, 6])], True)
        self.assertEqual(pair.shape, [2, 3])
        self.assertEqual(pair.data, [1, 2, 3, 4, 5, 6])
        self.assertTrue(pair.fill)

    def test_from_row_arrays_leaves_input_rows_untouched(self) -> None:
        from tacit_array import Array

        row = Array.from_list([1.0, 2.0, 3.0])
        single = Array.from_row_arrays([row], False)
        self.assertIsNot(single, row)
        self.assertEqual(single.shape, [1, 3])
        self.assertEqual(row.shape, [3])
        single.data[0] = 9.0
        self.assertEqual(row.data, [1.0, 2.0, 3.0])

        first, second, third = Array.from_list([1.0]), Array.from_list([2.0]), Array.from_list([3.0])
        out = Array.from_row_arrays([first, second, third], True)
        self.assertTrue(out.fill)
        self.assertEqual(out.shape, [3, 1])
        for arr in (first, second, third):
            self.assertFalse(arr.fill)
            self.assertEqual(arr.shape, [1])

    def test_from_row_arrays_pads_ragged_text(self) -> None:
        from tacit_array import Array

        rows = [Array.from_string(s) for s in ("ab", "abc", "a")]
        arr = Array.from_row_arrays(rows, False)
        self.assertEqual(arr.shape, [3, 3])
        self.assertEqual(arr, Array.from_lines(["ab", "abc", "a"]))
        self.assertTrue(arr.fill)

    def test_from_row_arrays_propagates_shape_errors(self) -> None:
        from tacit_array import Array, ArrayShapeError, ArrayTypeError, Context

        ctx = Context(where="rows", start=3, end=7)
        with self.assertRaises(ArrayShapeError) as caught:
            Array.from_row_arrays([Array.from_list([1, 2]), Array.from_list([1, 2, 3])], False, ctx)
        self.assertEqual(caught.exception.where, "rows")
        self.assertEqual(caught.exception.span, (3, 7))
        self.assertIn("at span [3, 7)", str(caught.exception))

        rows = [Array.from_list([1, 2]), Array.from_list([3, 4]), Array.from_list([1, 2, 3])]
        with self.assertRaises(ArrayShapeError):
            Array.from_row_arrays(rows, False)

        with self.assertRaises(ArrayTypeError):
            Array.from_row_arrays([Array.from_list([1]), Array.from_string("a")], False)

    def test_from_row_arrays_fill_flag_allows_ragged_numbers(self) -> None:
        import math

        from tacit_array import Array

        rows = [Array.from_list([1.0, 2.0]), Array.from_list([3.0]), Array.from_list([4.0, 5.0, 6.0])]
        arr = Array.from_row_arrays(rows, True)
        self.assertEqual(arr.shape, [3, 3])
        self.assertTrue(arr.fill)
        self.assertEqual(arr.data[:2], [1.0, 2.0])
        self.assertTrue(math.isnan(arr.data[2]))
        self.assertEqual(arr.data[6:], [4.0, 5.0, 6.0])


if __name__ == "__main__":
    unittest.main()
