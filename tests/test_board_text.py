import unittest

from sudoku.board_text import BOX_ROW_SEPARATOR, format_board_rows, format_board_text, parse_board_text


SOLVED_CLASSIC = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


class TestParseBoardText(unittest.TestCase):
    def test_parses_one_digit_per_cell(self) -> None:
        self.assertEqual(parse_board_text("1004\n0410\n2003\n0320\n"), [[1, 0, 0, 4], [0, 4, 1, 0], [2, 0, 0, 3], [0, 3, 2, 0]])

    def test_ignores_whitespace_and_blank_lines(self) -> None:
        text = "1 0 0 4\n\n 0 4 1 0\t\r\n2003\n0 3 2 0\n\n"
        self.assertEqual(parse_board_text(text), [[1, 0, 0, 4], [0, 4, 1, 0], [2, 0, 0, 3], [0, 3, 2, 0]])

    def test_keeps_jagged_rows_for_later_validation(self) -> None:
        self.assertEqual(parse_board_text("12\n3"), [[1, 2], [3]])

    def test_rejects_non_digit_characters(self) -> None:
        with self.assertRaises(ValueError):
            parse_board_text("1.04\n0410\n2003\n0320\n")

    def test_rejects_text_without_rows(self) -> None:
        with self.assertRaises(ValueError):
            parse_board_text("\n   \n")


class TestFormatBoard(unittest.TestCase):
    def test_nine_by_nine_uses_box_separators(self) -> None:
        rows = format_board_rows(SOLVED_CLASSIC)
        self.assertEqual(len(rows), 11)
        self.assertEqual(rows[0], "5 3 4 | 6 7 8 | 9 1 2")
        self.assertEqual(rows[3], BOX_ROW_SEPARATOR)
        self.assertEqual(rows[7], BOX_ROW_SEPARATOR)
        self.assertEqual(rows[10], "3 4 5 | 2 8 6 | 1 7 9")
        self.assertEqual(len(rows[0]), len(BOX_ROW_SEPARATOR))

    def test_other_sizes_use_plain_rows(self) -> None:
        text = format_board_text([[1, 2, 3, 4], [3, 4, 1, 2], [2, 1, 4, 3], [4, 3, 2, 1]])
        self.assertEqual(text, "1 2 3 4\n3 4 1 2\n2 1 4 3\n4 3 2 1")

    def test_formatted_plain_board_parses_back(self) -> None:
        cells = [[1, 0, 0, 4], [0, 4, 1, 0], [2, 0, 0, 3], [0, 3, 2, 0]]
        self.assertEqual(parse_board_text(format_board_text(cells)), cells)


if __name__ == "__main__":
    unittest.main()
