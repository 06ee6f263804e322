import logging
import os
from typing import Optional, TypeVar

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from sudoku.board_text import format_board_rows
from sudoku.constraints import candidates_for
from sudoku.solver import boards_equal, solve_board
from sudoku.state import build_grid
from sudoku.types import EMPTY
from sudoku.validation import validate_coordinate

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T", int, float)


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


def _cors_origins() -> list[str]:
    raw = os.getenv("SUDOKU_CORS_ORIGINS", "http://127.0.0.1:5173,http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


_TRACE_MAX_STEPS_LIMIT = 20000
_FALLBACK_TRACE_MAX_STEPS = 1000


def _trace_max_steps_default() -> int:
    value = _env("SUDOKU_TRACE_MAX_STEPS", _FALLBACK_TRACE_MAX_STEPS)
    if not 1 <= value <= _TRACE_MAX_STEPS_LIMIT:
        _LOGGER.warning(
            "Ignoring SUDOKU_TRACE_MAX_STEPS=%s outside 1..%d, using %d",
            value,
            _TRACE_MAX_STEPS_LIMIT,
            _FALLBACK_TRACE_MAX_STEPS,
        )
        return _FALLBACK_TRACE_MAX_STEPS
    return value


_DEFAULT_TRACE_MAX_STEPS = _trace_max_steps_default()


class SolveRequest(BaseModel):
    cells: list[list[int]] = Field(..., description="Square board with 0 for empty cells and 1..N for givens")
    trace: bool = Field(default=False, description="Include solver trace output in the response")
    trace_steps: bool = Field(default=False, description="Include structured trace steps for walkthrough/debugging.")
    trace_max_steps: int = Field(
        default=_DEFAULT_TRACE_MAX_STEPS,
        ge=1,
        le=_TRACE_MAX_STEPS_LIMIT,
        description="Maximum number of trace steps to return.",
    )


class TraceStepResponse(BaseModel):
    event: str
    message: str
    depth: int
    row: Optional[int] = None
    col: Optional[int] = None
    value: Optional[int] = None
    candidates: Optional[list[int]] = None
    grid: list[list[int]]


class SolveResponse(BaseModel):
    solution: list[list[int]]
    grid_rows: list[str]
    grid_text: str
    trace: Optional[list[str]] = None
    trace_steps: Optional[list[TraceStepResponse]] = None
    trace_truncated: bool = False


class CandidatesRequest(BaseModel):
    cells: list[list[int]] = Field(..., description="Square board with 0 for empty cells and 1..N for givens")
    row: int = Field(..., ge=0, description="Zero-based row of an empty cell")
    col: int = Field(..., ge=0, description="Zero-based column of an empty cell")


class CandidatesResponse(BaseModel):
    row: int
    col: int
    candidates: list[int]


class CompareRequest(BaseModel):
    first: list[list[int]]
    second: list[list[int]]


class CompareResponse(BaseModel):
    equal: bool


app = FastAPI(
    title="Sudoku Solver API",
    description="Solve N x N Sudoku boards (N a perfect square) with backtracking and most-constrained-cell search.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/solve", response_model=SolveResponse)
def solve(request: SolveRequest) -> SolveResponse:
    try:
        if request.trace or request.trace_steps:
            trace_log: list[str] = []
            trace_steps: list[dict[str, object]] = []
            trace_meta = {"truncated": False}
            solution = solve_board(
                request.cells,
                trace_enabled=True,
                trace_log=trace_log,
                trace_steps=trace_steps if request.trace_steps else None,
                trace_meta=trace_meta,
                trace_max_steps=request.trace_max_steps,
            )
            grid_rows = format_board_rows(solution)
            return SolveResponse(
                solution=solution,
                grid_rows=grid_rows,
                grid_text="\n".join(grid_rows),
                trace=trace_log if request.trace else None,
                trace_steps=trace_steps if request.trace_steps else None,
                trace_truncated=trace_meta["truncated"],
            )

        solution = solve_board(request.cells)
        grid_rows = format_board_rows(solution)
        return SolveResponse(solution=solution, grid_rows=grid_rows, grid_text="\n".join(grid_rows))
    except ValueError as exc:
        _LOGGER.info("Rejected solve request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/candidates", response_model=CandidatesResponse)
def candidates(request: CandidatesRequest) -> CandidatesResponse:
    try:
        grid = build_grid(request.cells)
        validate_coordinate(grid.side_length, request.row, request.col)
        if grid.cells[request.row][request.col] != EMPTY:
            raise ValueError(f"cell ({request.row}, {request.col}) is already filled")
    except ValueError as exc:
        _LOGGER.info("Rejected candidates request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return CandidatesResponse(
        row=request.row,
        col=request.col,
        candidates=candidates_for(grid, request.row, request.col),
    )


@app.post("/compare", response_model=CompareResponse)
def compare(request: CompareRequest) -> CompareResponse:
    try:
        first = build_grid(request.first)
        second = build_grid(request.second)
    except ValueError as exc:
        _LOGGER.info("Rejected compare request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return CompareResponse(equal=boards_equal(first, second))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api:app", host="127.0.0.1", port=8000)
