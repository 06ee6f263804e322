import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from main import load_board_from_file, main, run, run_with_trace

BOARDS_DIR = Path(__file__).parent / "boards"


class TestMainTextInput(unittest.TestCase):
    def test_loads_board_and_derives_dimensions(self) -> None:
        grid = load_board_from_file(str(BOARDS_DIR / "classic.txt"))

        self.assertEqual(grid.side_length, 9)
        self.assertEqual(grid.box_size, 3)
        self.assertEqual(grid.fill_count, 30)
        self.assertEqual(grid.cells[0], [5, 3, 0, 0, 7, 0, 0, 0, 0])

    def test_raises_when_file_is_missing(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(ValueError):
                load_board_from_file(str(Path(temp_dir) / "missing.txt"))

    def test_raises_when_board_shape_is_invalid(self) -> None:
        file_path = self._write_text("000\n000\n000\n")
        with self.assertRaises(ValueError):
            load_board_from_file(file_path)

    def test_raises_when_rows_are_jagged(self) -> None:
        file_path = self._write_text("1004\n041\n2003\n0320\n")
        with self.assertRaises(ValueError):
            load_board_from_file(file_path)

    def test_loaded_board_can_be_solved(self) -> None:
        grid = load_board_from_file(str(BOARDS_DIR / "small-4x4.txt"))
        solution = load_board_from_file(str(BOARDS_DIR / "small-4x4-solution.txt"))

        self.assertEqual(run(grid), solution.cells)

    def test_run_returns_none_when_unsolvable(self) -> None:
        grid = load_board_from_file(str(BOARDS_DIR / "impossible-4x4.txt"))
        self.assertIsNone(run(grid))

    def test_run_with_trace_collects_trace_lines(self) -> None:
        grid = load_board_from_file(str(BOARDS_DIR / "small-4x4.txt"))
        solution, trace_log = run_with_trace(grid)

        self.assertIsNotNone(solution)
        self.assertTrue(any("Select cell" in line for line in trace_log))

    def _write_text(self, text: str) -> str:
        tmp_file = tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False, encoding="utf-8")
        tmp_file.write(text)
        tmp_file.flush()
        tmp_file.close()
        self.addCleanup(lambda: Path(tmp_file.name).unlink(missing_ok=True))
        return tmp_file.name


class TestMainCommand(unittest.TestCase):
    def test_prints_solved_board_with_box_separators(self) -> None:
        output = io.StringIO()
        with redirect_stdout(output):
            exit_code = main([str(BOARDS_DIR / "classic.txt")])

        self.assertEqual(exit_code, 0)
        lines = output.getvalue().splitlines()
        self.assertEqual(lines[0], "5 3 4 | 6 7 8 | 9 1 2")
        self.assertEqual(lines[3], "------+-------+------")

    def test_successful_run_writes_nothing_to_stderr(self) -> None:
        output = io.StringIO()
        errors = io.StringIO()
        with redirect_stdout(output), redirect_stderr(errors):
            exit_code = main([str(BOARDS_DIR / "small-4x4.txt")])

        self.assertEqual(exit_code, 0)
        self.assertEqual(errors.getvalue(), "")
        self.assertEqual(output.getvalue().splitlines(), ["1 2 3 4", "3 4 1 2", "2 1 4 3", "4 3 2 1"])

    def test_reports_no_solution(self) -> None:
        output = io.StringIO()
        with redirect_stdout(output):
            exit_code = main([str(BOARDS_DIR / "impossible-4x4.txt")])

        self.assertEqual(exit_code, 1)
        self.assertEqual(output.getvalue().strip(), "No solution")

    def test_trace_flag_prints_trace_after_board(self) -> None:
        output = io.StringIO()
        with redirect_stdout(output):
            exit_code = main([str(BOARDS_DIR / "small-4x4.txt"), "--trace"])

        self.assertEqual(exit_code, 0)
        lines = output.getvalue().splitlines()
        self.assertEqual(lines[0], "1 2 3 4")
        self.assertTrue(any("Initialized search" in line for line in lines[4:]))

    def test_exits_when_file_cannot_be_opened(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(SystemExit) as context:
                main([str(Path(temp_dir) / "missing.txt")])

        self.assertIn("input file not found", str(context.exception.code))


if __name__ == "__main__":
    unittest.main()
