"""Game of Fifteen in the terminal.

Usage: fifteen d

whereby the board's dimensions are to be d x d, where d must be in
[DIM_MIN, DIM_MAX]. Every board shown and every move entered is also
written to log.txt.
"""
import logging
import os
import sys
import time

from fifteen.fifteenGame import DIM_MAX, DIM_MIN, Board, DimensionError, FifteenError
from fifteen.fifteenLog import LOG_PATH, LogOpenError, MoveLog

GREET_DELAY = 0.2  # seconds
FRAME_DELAY = 0.05  # seconds, pause between redraws

PROMPT = "Tile to move (0 to exit): "

logger = logging.getLogger(__name__)


class UsageError(FifteenError):
    exit_code = 1

    def __init__(self):
        super().__init__("Usage: fifteen d")


def parse_dimension(argv):
    """Return d from the command-line arguments (program name excluded)."""
    if len(argv) != 1:
        raise UsageError()
    try:
        size = int(argv[0])
    except ValueError:
        raise DimensionError(argv[0]) from None
    if size < DIM_MIN or size > DIM_MAX:
        raise DimensionError(size)
    return size


def clear():
    """Clear the screen and home the cursor (ANSI escape sequences)."""
    print("\033[2J", end="")
    print("\033[0;0H", end="", flush=True)


def greet():
    clear()
    print("WELCOME TO GAME OF FIFTEEN")
    time.sleep(GREET_DELAY)


def draw(board):
    for line in board.render():
        print(line)


def read_tile():
    """Prompt until the player types an integer; end of input counts as 0."""
    while True:
        try:
            answer = input(PROMPT)
        except EOFError:
            print()
            return 0
        try:
            return int(answer.strip())
        except ValueError:
            logger.debug("ignoring non-numeric input %r", answer)


def play(board, log):
    """Run the prompt loop until the board is won or the player quits.

    Returns True if the game ended in a win.
    """
    while True:
        clear()
        draw(board)
        log.record_board(board)

        if board.iswon():
            print("win!")
            logger.info("won on a %dx%d board", board.size, board.size)
            return True

        tile = read_tile()
        if tile == 0:
            logger.info("player quit")
            return False

        log.record_move(tile)

        if not board.move(tile):
            print("\nIllegal move.")
            time.sleep(FRAME_DELAY)

        # pause for animation's sake
        time.sleep(FRAME_DELAY)


def main(argv=None):
    logging.basicConfig(level=os.environ.get("FIFTEEN_LOGLEVEL", "WARNING").upper())
    if argv is None:
        argv = sys.argv[1:]

    try:
        size = parse_dimension(argv)
        log = MoveLog.open(LOG_PATH)
    except FifteenError as e:
        logger.debug("startup failed: %s", e)
        stream = sys.stderr if isinstance(e, LogOpenError) else sys.stdout
        print(e, file=stream)
        return e.exit_code

    with log:
        greet()
        board = Board.initial(size)
        try:
            play(board, log)
        except KeyboardInterrupt:
            print()
    return 0


if __name__ == '__main__':
    sys.exit(main())
