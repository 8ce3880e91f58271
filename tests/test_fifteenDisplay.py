"""Unit tests for fifteen/fifteenDisplay.py (no window is opened)"""

from unittest.mock import Mock

import pygame
import pytest

from fifteen.fifteenDisplay import (
    GRAY,
    GREEN,
    TILE_SIZE,
    WHITE,
    WINDOW_PADDING,
    draw_board,
    main,
    tile_at,
    tile_for_arrow,
)
from fifteen.fifteenGame import Board


def cell_corner(row: int, col: int) -> tuple[int, int]:
    return WINDOW_PADDING + col * TILE_SIZE + 2, WINDOW_PADDING + row * TILE_SIZE + 2


@pytest.fixture
def board3() -> Board:
    return Board.initial(3)


def test_tile_at_maps_pixels_to_tiles(board3: Board) -> None:
    assert tile_at(board3, cell_corner(0, 0)) == 8
    assert tile_at(board3, cell_corner(1, 2)) == 3
    assert tile_at(board3, cell_corner(2, 1)) == 1


def test_tile_at_blank_and_margins(board3: Board) -> None:
    assert tile_at(board3, cell_corner(2, 2)) is None
    assert tile_at(board3, (5, 5)) is None
    assert tile_at(board3, (WINDOW_PADDING + 3 * TILE_SIZE + 1, 30)) is None


@pytest.mark.parametrize(
    "direction, tile",
    [("right", 1), ("down", 3), ("left", None), ("up", None)],
)
def test_tile_for_arrow_with_blank_in_corner(board3: Board, direction: str, tile) -> None:
    assert tile_for_arrow(board3, direction) == tile


def test_arrow_tile_is_a_legal_move(board3: Board) -> None:
    assert board3.move(tile_for_arrow(board3, "right"))
    assert board3.positions[0] == [2, 1]
    assert tile_for_arrow(board3, "left") == 1


def test_draw_board_colours_tiles() -> None:
    board = Board([[1, 2, 3], [4, 5, 6], [8, 7, 0]])
    screen = pygame.Surface((WINDOW_PADDING * 2 + 3 * TILE_SIZE,) * 2)
    font = Mock()
    font.render.return_value = pygame.Surface((4, 4))

    draw_board(screen, board, font)

    assert tuple(screen.get_at(cell_corner(0, 0)))[:3] == GREEN
    assert tuple(screen.get_at(cell_corner(2, 0)))[:3] == WHITE
    assert tuple(screen.get_at(cell_corner(2, 2)))[:3] == GRAY
    assert font.render.call_count == 8


@pytest.mark.parametrize("argv, code", [([], 1), (["12"], 2)])
def test_main_rejects_bad_arguments(argv: list, code: int) -> None:
    assert main(argv) == code
