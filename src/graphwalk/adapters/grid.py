"""
Maze-to-graph adapter.

A maze is a rectangular grid of junctures addressed by (x, y), with (0, 0)
in the upper left corner. Adjacent junctures are either separated by a wall
or joined by a passage with a non-negative weight. MazeGraph turns a maze
into a WeightedGraph: every juncture becomes a vertex, and every passage
becomes a pair of directed edges, one in each direction.

The adapter only uses the graph's add_vertex and add_edge operations; which
vertices and edges exist is decided entirely by the maze.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Protocol, Set, Tuple

from ..core.config import EngineConfig
from ..core.graph import WeightedGraph

DEFAULT_PASSAGE_WEIGHT = 1


@dataclass(frozen=True, order=True)
class Juncture:
    """A cell of a maze, identified by its grid coordinates."""

    x: int
    y: int

    def above(self) -> "Juncture":
        return Juncture(self.x, self.y - 1)

    def below(self) -> "Juncture":
        return Juncture(self.x, self.y + 1)

    def left(self) -> "Juncture":
        return Juncture(self.x - 1, self.y)

    def right(self) -> "Juncture":
        return Juncture(self.x + 1, self.y)


class Maze(Protocol):
    """Protocol defining what MazeGraph needs from a maze."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def is_wall_above(self, juncture: Juncture) -> bool: ...

    def is_wall_below(self, juncture: Juncture) -> bool: ...

    def is_wall_to_left(self, juncture: Juncture) -> bool: ...

    def is_wall_to_right(self, juncture: Juncture) -> bool: ...

    def get_weight_above(self, juncture: Juncture) -> int: ...

    def get_weight_below(self, juncture: Juncture) -> int: ...

    def get_weight_to_left(self, juncture: Juncture) -> int: ...

    def get_weight_to_right(self, juncture: Juncture) -> int: ...


def _passage(a: Juncture, b: Juncture) -> FrozenSet[Juncture]:
    return frozenset((a, b))


@dataclass
class GridMaze:
    """
    Rectangular maze with explicit walls and passage weights.

    The outer boundary is always walled. Inside it, adjacent junctures are
    connected unless a wall has been placed between them. Passages weigh
    ``DEFAULT_PASSAGE_WEIGHT`` unless given a weight of their own; a weight
    applies in both directions.

    Attributes:
        width (int): Number of columns
        height (int): Number of rows
        walls (Set[FrozenSet[Juncture]]): Walled pairs of adjacent junctures
        weights (Dict[FrozenSet[Juncture], int]): Passage weights
    """

    width: int
    height: int
    walls: Set[FrozenSet[Juncture]] = field(default_factory=set)
    weights: Dict[FrozenSet[Juncture], int] = field(default_factory=dict)

    def __post_init__(self):
        """Validate maze dimensions."""
        if self.width < 1 or self.height < 1:
            raise ValueError("maze dimensions must be positive")

    def contains(self, juncture: Juncture) -> bool:
        """Check if a juncture lies inside the maze."""
        return 0 <= juncture.x < self.width and 0 <= juncture.y < self.height

    def _check_adjacent(self, a: Juncture, b: Juncture) -> None:
        if not (self.contains(a) and self.contains(b)):
            raise ValueError(f"{a} and {b} must both lie inside the maze")
        if abs(a.x - b.x) + abs(a.y - b.y) != 1:
            raise ValueError(f"{a} and {b} are not adjacent")

    def add_wall(self, a: Juncture, b: Juncture) -> None:
        """Place a wall between two adjacent junctures."""
        self._check_adjacent(a, b)
        self.walls.add(_passage(a, b))

    def set_weight(self, a: Juncture, b: Juncture, weight: int) -> None:
        """Set the weight of the passage between two adjacent junctures."""
        self._check_adjacent(a, b)
        self.weights[_passage(a, b)] = weight

    def _is_wall(self, a: Juncture, b: Juncture) -> bool:
        return not self.contains(b) or _passage(a, b) in self.walls

    def _weight(self, a: Juncture, b: Juncture) -> int:
        return self.weights.get(_passage(a, b), DEFAULT_PASSAGE_WEIGHT)

    def is_wall_above(self, juncture: Juncture) -> bool:
        return self._is_wall(juncture, juncture.above())

    def is_wall_below(self, juncture: Juncture) -> bool:
        return self._is_wall(juncture, juncture.below())

    def is_wall_to_left(self, juncture: Juncture) -> bool:
        return self._is_wall(juncture, juncture.left())

    def is_wall_to_right(self, juncture: Juncture) -> bool:
        return self._is_wall(juncture, juncture.right())

    def get_weight_above(self, juncture: Juncture) -> int:
        return self._weight(juncture, juncture.above())

    def get_weight_below(self, juncture: Juncture) -> int:
        return self._weight(juncture, juncture.below())

    def get_weight_to_left(self, juncture: Juncture) -> int:
        return self._weight(juncture, juncture.left())

    def get_weight_to_right(self, juncture: Juncture) -> int:
        return self._weight(juncture, juncture.right())

    @classmethod
    def from_rows(cls, rows: Tuple[str, ...]) -> "GridMaze":
        """
        Build a maze from a text drawing.

        Junctures are drawn as ``+``; a ``-`` or ``|`` between two of them
        is a wall, a space or digit is a passage (the digit is its weight).
        The cell interiors between four junctures are left blank.
        For example a 2x2 maze with one wall down the middle of the top row::

            ("+|+",
             "   ",
             "+ +")

        Raises:
            ValueError: If the drawing is not a well-formed grid
        """
        if not rows or len(rows) % 2 == 0 or any(len(r) != len(rows[0]) for r in rows):
            raise ValueError("drawing must have an odd number of equally long rows")
        if len(rows[0]) % 2 == 0:
            raise ValueError("drawing rows must have odd length")

        maze = cls(width=len(rows[0]) // 2 + 1, height=len(rows) // 2 + 1)
        for row_index, row in enumerate(rows):
            for col_index, char in enumerate(row):
                position = f"row {row_index}, column {col_index}"
                if row_index % 2 == 0 and col_index % 2 == 0:
                    if char != "+":
                        raise ValueError(f"expected '+' at juncture {position}, got {char!r}")
                    continue
                if row_index % 2 == 1 and col_index % 2 == 1:
                    if char != " ":
                        raise ValueError(f"expected ' ' inside cell at {position}, got {char!r}")
                    continue

                a = Juncture(col_index // 2, row_index // 2)
                b = a.right() if row_index % 2 == 0 else a.below()
                if char in "-|":
                    maze.add_wall(a, b)
                elif char in "0123456789":
                    maze.set_weight(a, b, int(char))
                elif char != " ":
                    raise ValueError(f"unexpected {char!r} in passage at {position}")
        return maze


class MazeGraph(WeightedGraph[Juncture]):
    """
    WeightedGraph built from a maze.

    Junctures are added row by row, left to right. Edges are then added per
    juncture in the order below, above, left, right, for each direction not
    blocked by a wall.
    """

    def __init__(self, maze: Maze, config: Optional[EngineConfig] = None):
        """
        Initialize graph from a maze.

        Args:
            maze (Maze): Source of junctures, walls and passage weights
            config (Optional[EngineConfig]): Engine configuration
        """
        super().__init__(config)
        for y in range(maze.height):
            for x in range(maze.width):
                self.add_vertex(Juncture(x, y))

        for y in range(maze.height):
            for x in range(maze.width):
                juncture = Juncture(x, y)
                if not maze.is_wall_below(juncture):
                    self.add_edge(juncture, juncture.below(), maze.get_weight_below(juncture))
                if not maze.is_wall_above(juncture):
                    self.add_edge(juncture, juncture.above(), maze.get_weight_above(juncture))
                if not maze.is_wall_to_left(juncture):
                    self.add_edge(juncture, juncture.left(), maze.get_weight_to_left(juncture))
                if not maze.is_wall_to_right(juncture):
                    self.add_edge(juncture, juncture.right(), maze.get_weight_to_right(juncture))
