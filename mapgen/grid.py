"""Sparse-then-dense 2D grid with ring geometry queries."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, NamedTuple, TypeVar

import numpy as np

T = TypeVar("T")


class RingOutOfRange(IndexError):
    """Raised when a ring index lies beyond the innermost ring of a grid."""


class DimensionMismatch(ValueError):
    """Raised when grids of different sizes are merged."""


class IncompleteGrid(RuntimeError):
    """Raised when a grid with absent cells is materialized."""


class Coordinate(NamedTuple):
    """Row-major grid position; (0, 0) is the top-left cell."""

    y: int
    x: int


class Grid(Generic[T]):
    """Fixed-size grid whose cells are either present (holding a value) or absent.

    Presence is tracked in a boolean mask kept beside the value array, so any
    value, including ``None`` or ``0``, can be stored and still count as present.
    Width and height are real sizes, not 0-based maxima.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self._width = int(width)
        self._height = int(height)
        self._cells = np.empty((self._height, self._width), dtype=object)
        self._present = np.zeros((self._height, self._width), dtype=bool)

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid[T]":
        return cls(width, height)

    @classmethod
    def filled(cls, width: int, height: int, item: T) -> "Grid[T]":
        return cls(width, height).fill_empty_with(item)

    @classmethod
    def filled_by(cls, width: int, height: int, supplier: Callable[[Coordinate], T]) -> "Grid[T]":
        """Fill every cell from ``supplier``, called once per coordinate in row-major order."""

        grid: Grid[T] = cls(width, height)
        for coord in grid.coordinates():
            grid.set(coord, supplier(coord))
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> tuple[int, int]:
        return self._height, self._width

    def coordinates(self) -> Iterator[Coordinate]:
        for y in range(self._height):
            for x in range(self._width):
                yield Coordinate(y, x)

    def in_bounds(self, coord: tuple[int, int]) -> bool:
        y, x = coord
        return 0 <= y < self._height and 0 <= x < self._width

    def _check(self, coord: tuple[int, int]) -> tuple[int, int]:
        if not self.in_bounds(coord):
            raise IndexError(f"coordinate {tuple(coord)} outside {self._width}x{self._height} grid")
        y, x = coord
        return int(y), int(x)

    def is_present(self, coord: tuple[int, int]) -> bool:
        return bool(self._present[self._check(coord)])

    def get(self, coord: tuple[int, int], default: T | None = None) -> T | None:
        """Return the value at ``coord``, or ``default`` when the cell is absent."""

        index = self._check(coord)
        if not self._present[index]:
            return default
        return self._cells[index]

    def set(self, coord: tuple[int, int], item: T) -> "Grid[T]":
        index = self._check(coord)
        self._cells[index] = item
        self._present[index] = True
        return self

    def clear(self, coord: tuple[int, int]) -> "Grid[T]":
        index = self._check(coord)
        self._cells[index] = None
        self._present[index] = False
        return self

    @property
    def present_count(self) -> int:
        return int(self._present.sum())

    def is_dense(self) -> bool:
        return bool(self._present.all())

    def get_row(self, row: int, default: T | None = None) -> list[T | None]:
        """Return row ``row``, with ``default`` standing in for absent cells."""

        if not 0 <= row < self._height:
            raise IndexError(f"row {row} outside {self._width}x{self._height} grid")
        return [self._cells[row, x] if self._present[row, x] else default for x in range(self._width)]

    def get_column(self, col: int, default: T | None = None) -> list[T | None]:
        if not 0 <= col < self._width:
            raise IndexError(f"column {col} outside {self._width}x{self._height} grid")
        return [self._cells[y, col] if self._present[y, col] else default for y in range(self._height)]

    def presence(self) -> np.ndarray:
        """Copy of the present/absent mask, shaped (height, width)."""

        return self._present.copy()

    def get_adjacent_neighbours(self, coord: tuple[int, int]) -> list[T]:
        """Return present values among the orthogonal neighbours of ``coord``.

        Neighbours outside the grid or absent are skipped.
        """

        y, x = coord
        neighbours: list[T] = []
        for ny, nx in ((y - 1, x), (y + 1, x), (y, x + 1), (y, x - 1)):
            if self.in_bounds((ny, nx)) and self._present[ny, nx]:
                neighbours.append(self._cells[ny, nx])
        return neighbours

    def is_ring_valid(self, ring: int) -> bool:
        """A ring is valid up to half the smaller dimension (one further when it is odd)."""

        if ring < 0:
            return False
        smallest = min(self._width, self._height)
        if smallest % 2 == 0:
            return ring <= smallest // 2
        return ring <= smallest // 2 + 1

    def get_ring_coordinates(self, ring: int) -> list[Coordinate]:
        """Return the boundary of the rectangle inset ``ring`` cells from the grid edge.

        Ring 0 is the outer border. Coordinates are ordered clockwise from the
        top-left corner, each listed once. Rings past the centre of the grid
        but still valid are empty.
        """

        if not self.is_ring_valid(ring):
            raise RingOutOfRange(
                f"ring {ring} out of range for {self._width}x{self._height} grid"
            )
        top, left = ring, ring
        bottom = self._height - 1 - ring
        right = self._width - 1 - ring

        if top > bottom or left > right:
            return []
        if top == bottom:
            return [Coordinate(top, x) for x in range(left, right + 1)]
        if left == right:
            return [Coordinate(y, left) for y in range(top, bottom + 1)]

        coords = [Coordinate(top, x) for x in range(left, right + 1)]
        coords.extend(Coordinate(y, right) for y in range(top + 1, bottom + 1))
        coords.extend(Coordinate(bottom, x) for x in range(right - 1, left - 1, -1))
        coords.extend(Coordinate(y, left) for y in range(bottom - 1, top, -1))
        return coords

    def flatten_onto(self, top: "Grid[T]") -> "Grid[T]":
        """Overwrite this grid with every present cell of ``top`` and return self."""

        if top.shape != self.shape:
            raise DimensionMismatch(
                f"cannot flatten {top.width}x{top.height} grid onto {self._width}x{self._height} grid"
            )
        mask = top._present
        self._cells[mask] = top._cells[mask]
        self._present |= mask
        return self

    def fill_empty_with(self, item: T) -> "Grid[T]":
        for y, x in zip(*np.nonzero(~self._present)):
            self._cells[y, x] = item
        self._present[:] = True
        return self

    def get_grid(self) -> list[list[T]]:
        """Materialize the grid as row lists; every cell must be present."""

        if not self.is_dense():
            missing = self._width * self._height - self.present_count
            raise IncompleteGrid(f"grid still has {missing} empty cells")
        return self._cells.tolist()

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, present={self.present_count})"


def flatten(base: Grid[T], *tops: Grid[T]) -> Grid[T]:
    """Flatten ``tops`` onto ``base`` left to right; later grids win."""

    for top in tops:
        base.flatten_onto(top)
    return base
