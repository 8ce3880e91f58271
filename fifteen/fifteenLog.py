import logging
from collections import namedtuple

from fifteen.fifteenGame import Board, FifteenError

LOG_PATH = "log.txt"

logger = logging.getLogger(__name__)

# tile is None when the player quit (or won) after this board was logged
LogEntry = namedtuple("LogEntry", ["board", "tile"])


class LogOpenError(FifteenError):
    exit_code = 3


class MoveLog:
    """Write-only record of a game, one board snapshot per turn.

    Each board is written row by row with cells separated by `|`; the tile
    the player asked to move follows on its own line. Every write is
    flushed so the file can be inspected while the game is running.
    """

    def __init__(self, stream):
        self.stream = stream

    @classmethod
    def open(cls, path=LOG_PATH):
        try:
            stream = open(path, "w")
        except OSError as e:
            raise LogOpenError(f"Could not open {path} for writing: {e}") from e
        logger.debug("logging moves to %s", path)
        return cls(stream)

    def record_board(self, board):
        for row in board.to_list():
            self.stream.write("|".join(str(v) for v in row) + "\n")
        self.stream.flush()

    def record_move(self, tile):
        self.stream.write(f"{tile}\n")
        self.stream.flush()

    def close(self):
        self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


def read_log(source):
    """Parse a move log back into a list of LogEntry.

    `source` is a path or an iterable of lines. A line containing `|` is a
    board row; a bare integer is the move attempted on the board above it.
    Raises ValueError on anything else.
    """
    if isinstance(source, str):
        with open(source, "r") as f:
            lines = f.read().splitlines()
    else:
        lines = [line.rstrip("\n") for line in source]

    entries = []
    rows = []
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        if "|" in line:
            try:
                row = [int(x) for x in line.split("|")]
            except ValueError:
                raise ValueError(f"line {lineno}: bad board row {line!r}") from None
            if rows and len(row) != len(rows[0]):
                raise ValueError(f"line {lineno}: expected {len(rows[0])} cells, got {len(row)}")
            rows.append(row)
            if len(rows) == len(row):
                entries.append(LogEntry(Board(rows), None))
                rows = []
            continue

        if rows:
            raise ValueError(f"line {lineno}: move inside an incomplete board")
        if not entries or entries[-1].tile is not None:
            raise ValueError(f"line {lineno}: move without a board")
        try:
            tile = int(line)
        except ValueError:
            raise ValueError(f"line {lineno}: bad move {line!r}") from None
        entries[-1] = entries[-1]._replace(tile=tile)

    if rows:
        raise ValueError("log ends in the middle of a board")
    return entries
