EMPTY = 0
MIN_VALUE = 1
MAX_SIDE_LENGTH = 25

Cells = list[list[int]]
Coordinate = tuple[int, int]
CellChoice = tuple[int, int, list[int]]
TraceLog = list[str]
TraceStep = dict[str, object]
TraceMeta = dict[str, bool]
