import logging
import os
import sys

import pygame

from fifteen.fifteenGame import Board, FifteenError
from fifteen.fifteenTerminal import parse_dimension


WINDOW_PADDING = 20
TILE_SIZE = 80
FONT_SIZE = 40
PANEL_HEIGHT = 40

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (96, 192, 96)
GRAY = (200, 200, 200)
TEXT_COLOR = (0, 0, 0)

# arrow key -> offset from the blank to the tile that slides that way
ARROW_SOURCES = {
    'up': (1, 0),
    'down': (-1, 0),
    'left': (0, 1),
    'right': (0, -1),
}

logger = logging.getLogger(__name__)


def tile_at(board, pos):
    """Return the tile under window pixel `pos`, or None for the blank and the margins."""
    x, y = pos
    col = (x - WINDOW_PADDING) // TILE_SIZE
    row = (y - WINDOW_PADDING) // TILE_SIZE
    if x < WINDOW_PADDING or y < WINDOW_PADDING:
        return None
    if not (0 <= row < board.size and 0 <= col < board.size):
        return None
    val = board.tiles[board.index(row, col)]
    return val or None


def tile_for_arrow(board, direction):
    """Return the tile that would slide in `direction` ('up', 'down', 'left', 'right').

    Under the "tile moves into the blank" semantics, 'up' is the tile below
    the blank, 'left' the tile to its right, and so on. None when the blank
    is on that edge.
    """
    dr, dc = ARROW_SOURCES[direction]
    zr, zc = board.positions[0]
    sr, sc = zr + dr, zc + dc
    if 0 <= sr < board.size and 0 <= sc < board.size:
        return board.tiles[board.index(sr, sc)]
    return None


def draw_board(screen, board, font, last_moved=None):
    size = board.size

    screen.fill(GRAY)

    for r in range(size):
        for c in range(size):
            idx = board.index(r, c)
            val = board.tiles[idx]

            # determine color: empty = GRAY, correct position = GREEN, else WHITE
            if val == 0:
                color = GRAY
                text_color = WHITE
            elif val == idx + 1:
                color = GREEN
                text_color = BLACK
            else:
                color = WHITE
                text_color = BLACK

            # darken the tile that just moved a little
            if last_moved == val and val != 0:
                color = tuple(int(x * 0.85) for x in color)

            x = WINDOW_PADDING + c * TILE_SIZE
            y = WINDOW_PADDING + r * TILE_SIZE
            rect = pygame.Rect(x, y, TILE_SIZE - 2, TILE_SIZE - 2)
            pygame.draw.rect(screen, color, rect)

            if val != 0:
                text = font.render(str(val), True, text_color)
                text_rect = text.get_rect(center=rect.center)
                screen.blit(text, text_rect)


def draw_status(screen, board, font, moves_count):
    y = WINDOW_PADDING * 2 + board.size * TILE_SIZE - 10
    status = "Solved!" if board.iswon() else "Click a tile or use the arrows"
    text = font.render(f"Moves: {moves_count}   {status}", True, TEXT_COLOR)
    screen.blit(text, (WINDOW_PADDING, y))


def main(argv=None):
    logging.basicConfig(level=os.environ.get("FIFTEEN_LOGLEVEL", "WARNING").upper())
    if argv is None:
        argv = sys.argv[1:]
    try:
        size = parse_dimension(argv)
    except FifteenError as e:
        print(e)
        return e.exit_code

    pygame.init()
    pygame.display.set_caption("Game of Fifteen")

    board = Board.initial(size)

    win_w = size * TILE_SIZE + WINDOW_PADDING * 2
    win_h = size * TILE_SIZE + WINDOW_PADDING * 2 + PANEL_HEIGHT
    screen = pygame.display.set_mode((win_w, win_h))
    font = pygame.font.SysFont(None, FONT_SIZE)
    small = pygame.font.SysFont(None, 20)

    clock = pygame.time.Clock()
    last_moved = None
    moves_count = 0

    keys = {
        pygame.K_UP: 'up',
        pygame.K_DOWN: 'down',
        pygame.K_LEFT: 'left',
        pygame.K_RIGHT: 'right',
    }

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break

            tile = None
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break
                if event.key in keys:
                    tile = tile_for_arrow(board, keys[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                tile = tile_at(board, event.pos)

            # once solved the board is frozen
            if tile is None or board.iswon():
                continue
            if board.move(tile):
                last_moved = tile
                moves_count += 1
                if board.iswon():
                    logger.info("won in %d moves", moves_count)
            else:
                logger.debug("illegal move %d", tile)

        if board.iswon():
            pygame.display.set_caption("Game of Fifteen - Solved!")
        else:
            pygame.display.set_caption("Game of Fifteen")

        draw_board(screen, board, font, last_moved)
        draw_status(screen, board, small, moves_count)

        pygame.display.flip()

        clock.tick(30)

    pygame.quit()
    return 0


if __name__ == '__main__':
    sys.exit(main())
