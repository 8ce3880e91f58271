import logging
import math

DIM_MIN = 3
DIM_MAX = 9

BLANK_GLYPH = "_"
CELL_WIDTH = 3

# neighbour offsets, checked in this order: right, left, down, up
DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))

logger = logging.getLogger(__name__)


class FifteenError(Exception):
	"""Fatal startup error; `exit_code` is what the process returns."""

	exit_code = 1


class DimensionError(FifteenError):
	exit_code = 2

	def __init__(self, size=None):
		super().__init__(
			f"Board must be between {DIM_MIN} x {DIM_MIN} and {DIM_MAX} x {DIM_MAX}, inclusive."
		)
		self.size = size


class Snapshot:
	"""Text picture of a board taken at render time.

	Rows are built lazily while iterating and the snapshot can be iterated
	again with the same result; later moves on the board do not change it.
	"""

	def __init__(self, tiles, size):
		self.size = size
		self.tiles = tuple(tiles)

	def __iter__(self):
		for start in range(0, len(self.tiles), self.size):
			row = self.tiles[start : start + self.size]
			yield "".join(
				(BLANK_GLYPH if v == 0 else str(v)).rjust(CELL_WIDTH) for v in row
			)

	def __len__(self):
		return self.size

	def __str__(self):
		return "\n".join(self)


class Board:
	"""Represents an N x N sliding puzzle board.

	- Internally stores tiles as a flat list of size N*N (0 represents the blank).
	- `positions` maps each tile value to its [row, col] coordinate.
	"""

	def __init__(self, tiles):
		# Accept either a flat list of ints or a nested list (list of rows).
		if not hasattr(tiles, "__iter__"):
			raise ValueError("tiles must be an iterable of ints or rows")
		tiles = list(tiles)

		# detect nested list
		if len(tiles) > 0 and isinstance(tiles[0], (list, tuple)):
			size = len(tiles)
			if any(len(row) != size for row in tiles):
				raise ValueError("Nested tiles must form a square")
			flat = [int(x) for row in tiles for x in row]
		else:
			flat = [int(x) for x in tiles]
			length = len(flat)
			size = int(math.isqrt(length))
			if size * size != length:
				raise ValueError("Flat tiles must have length that is a perfect square")

		if sorted(flat) != list(range(size * size)):
			raise ValueError(f"tiles must hold each of 0..{size * size - 1} exactly once")

		self.size = size
		self.tiles = flat
		# positions: value -> [row, col]
		self.positions = {}
		for idx, val in enumerate(self.tiles):
			r, c = divmod(idx, self.size)
			self.positions[val] = [r, c]

	@classmethod
	def initial(cls, size):
		"""Starting layout: d*d-1 down to 1 in row-major order, blank last.

		When d*d is even, tiles 1 and 2 are exchanged, otherwise the puzzle
		could not be solved.
		"""
		if not DIM_MIN <= size <= DIM_MAX:
			raise DimensionError(size)

		count = size * size
		tiles = [count - 1 - k for k in range(count)]
		if count % 2 == 0:
			a = (size - 1) * size + size - 3
			b = a + 1
			tiles[a], tiles[b] = tiles[b], tiles[a]
		logger.debug("initialized %dx%d board", size, size)
		return cls(tiles)

	def index(self, row, col):
		return row * self.size + col

	def to_list(self):
		return [self.tiles[i : i + self.size] for i in range(0, len(self.tiles), self.size)]

	def render(self):
		return Snapshot(self.tiles, self.size)

	def __str__(self):
		return str(self.render())

	def __eq__(self, other):
		if not isinstance(other, Board):
			return NotImplemented
		return self.tiles == other.tiles

	def copy(self):
		return Board(self.tiles.copy())

	def _blank_neighbour(self, row, col):
		"""Return the position of the blank if it borders (row, col), else None."""
		for dr, dc in DIRECTIONS:
			nr, nc = row + dr, col + dc
			if 0 <= nr < self.size and 0 <= nc < self.size:
				if self.tiles[self.index(nr, nc)] == 0:
					return nr, nc
		return None

	def move(self, tile):
		"""Slide `tile` into the blank if the two are orthogonal neighbours.

		Returns True if the tile moved. Anything else (a number that is not
		a tile, or a tile away from the blank) returns False and leaves the
		board as it was.
		"""
		if tile < 1 or tile > self.size * self.size - 1:
			logger.debug("rejected %d: not a tile", tile)
			return False

		r, c = self.positions[tile]
		target = self._blank_neighbour(r, c)
		if target is None:
			logger.debug("rejected %d: not next to the blank", tile)
			return False

		zr, zc = target
		t_idx = self.index(r, c)
		z_idx = self.index(zr, zc)
		# swap: tile moves into blank, blank moves to the tile's old square
		self.tiles[z_idx], self.tiles[t_idx] = self.tiles[t_idx], self.tiles[z_idx]
		self.positions[tile] = [zr, zc]
		self.positions[0] = [r, c]
		logger.debug("moved %d from (%d, %d) to (%d, %d)", tile, r, c, zr, zc)
		return True

	def iswon(self):
		"""Return True if every tile sits at its row-major rank; the blank is ignored."""
		for k, val in enumerate(self.tiles):
			if val != 0 and val != k + 1:
				return False
		return True
