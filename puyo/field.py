"""The playing field: grid, falling pair, chain resolution and scoring."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .cells import CellType, ChainInfo

Tsumo = tuple[CellType, CellType]
Position = tuple[int, int]

_CHAIN_BONUSES = (
    0, 8, 16, 32, 64, 96, 128, 160,
    192, 224, 256, 288, 320, 352, 384, 416, 448, 480, 512,
)
_LINK_BONUSES = {5: 2, 6: 3, 7: 4, 8: 5, 9: 6, 10: 7}
_COLOR_BONUSES = {1: 0, 2: 3, 3: 6, 4: 12, 5: 24}
_TSUMO_COLORS = (CellType.RED, CellType.GREEN, CellType.YELLOW, CellType.BLUE)
_NEIGHBOURS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def chain_bonus(chain: int) -> int:
    """Bonus for the given chain number."""
    if chain <= 0:
        return 0
    if chain <= len(_CHAIN_BONUSES):
        return _CHAIN_BONUSES[chain - 1]
    return _CHAIN_BONUSES[-1]


def link_bonus(size: int) -> int:
    """Bonus for erasing a connected group of the given size."""
    if size < 5:
        return 0
    return _LINK_BONUSES.get(size, 10)


def color_bonus(color_count: int) -> int:
    """Bonus for the number of distinct colours erased at once."""
    return _COLOR_BONUSES.get(color_count, 0)


def random_tsumo(rng: random.Random) -> Tsumo:
    """A random (center, sub) pair of the four basic colours."""
    return rng.choice(_TSUMO_COLORS), rng.choice(_TSUMO_COLORS)


@dataclass
class ActiveTsumo:
    """The falling pair: center position and offset of the sub puyo."""

    x: int = 2
    y: int = -1
    dx: int = 0
    dy: int = -1
    center: CellType = CellType.EMPTY
    sub: CellType = CellType.EMPTY


class Field:
    """A grid of cells with a falling pair and two queued pairs."""

    def __init__(
        self, height: int = 14, width: int = 6, rng: random.Random | None = None
    ) -> None:
        self.height = height
        self.width = width
        self.rng = rng if rng is not None else random.Random()
        self.grid = [[CellType.EMPTY] * width for _ in range(height)]
        empty_pair = (CellType.EMPTY, CellType.EMPTY)
        self.next_tsumos: tuple[Tsumo, Tsumo] = (empty_pair, empty_pair)
        self.active_tsumo = ActiveTsumo()
        self.score = 0
        self.current_chain_size = 0
        self.game_over = False

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def set_cell(self, x: int, y: int, cell: CellType) -> None:
        """Set a cell; positions outside the grid are ignored."""
        if self._in_bounds(x, y):
            self.grid[y][x] = cell

    def get_cell(self, x: int, y: int) -> CellType:
        """Cell at a position; anything outside the grid reads as a wall."""
        if self._in_bounds(x, y):
            return self.grid[y][x]
        return CellType.WALL

    def set_next_tsumos(self, next1: Tsumo, next2: Tsumo) -> None:
        self.next_tsumos = (tuple(next1), tuple(next2))

    def set_active_tsumo(
        self,
        center: CellType,
        sub: CellType,
        x: int = 2,
        y: int = -1,
        dx: int = 0,
        dy: int = -1,
    ) -> None:
        self.active_tsumo = ActiveTsumo(x, y, dx, dy, center, sub)

    def move_active_tsumo_left(self) -> None:
        t = self.active_tsumo
        if t.x != 0 and t.x + t.dx != 0:
            t.x -= 1

    def move_active_tsumo_right(self) -> None:
        t = self.active_tsumo
        last = self.width - 1
        if t.x != last and t.x + t.dx != last:
            t.x += 1

    def rotate_active_tsumo_left(self) -> None:
        """Turn the sub puyo counter-clockwise around the center."""
        t = self.active_tsumo
        if t.dy == -1:
            t.dx, t.dy = -1, 0
            if t.x == 0:
                t.x += 1
        elif t.dx == -1:
            t.dx, t.dy = 0, 1
            # The pair is shown above the grid, so the center moves up.
            t.y -= 1
        elif t.dy == 1:
            t.dx, t.dy = 1, 0
            t.y += 1
            if t.x == self.width - 1:
                t.x -= 1
        elif t.dx == 1:
            t.dx, t.dy = 0, -1

    def rotate_active_tsumo_right(self) -> None:
        """Turn the sub puyo clockwise around the center."""
        t = self.active_tsumo
        if t.dy == -1:
            t.dx, t.dy = 1, 0
            if t.x == self.width - 1:
                t.x -= 1
        elif t.dx == 1:
            t.dx, t.dy = 0, 1
            # The pair is shown above the grid, so the center moves up.
            t.y -= 1
        elif t.dy == 1:
            t.dx, t.dy = -1, 0
            t.y += 1
            if t.x == 0:
                t.x += 1
        elif t.dx == -1:
            t.dx, t.dy = 0, -1

    def _landing_row(self, x: int) -> tuple[int, bool]:
        """Row a puyo dropped into column x stops at, and whether it fits."""
        for y in range(self.height):
            if self.get_cell(x, y + 1) is not CellType.EMPTY:
                return y, self.get_cell(x, y) is CellType.EMPTY
        return 0, False

    def drop_active_tsumo(self) -> None:
        """Place the falling pair; nothing is placed unless both halves fit."""
        t = self.active_tsumo
        cx, sx = t.x, t.x + t.dx
        if t.dy == 1:
            first = (sx, t.sub)
            second = (cx, t.center)
        else:
            first = (cx, t.center)
            second = (sx, t.sub)

        first_x, first_cell = first
        first_y, first_fits = self._landing_row(first_x)
        original = self.get_cell(first_x, first_y)
        if first_fits:
            self.set_cell(first_x, first_y, first_cell)

        second_x, second_cell = second
        second_y, second_fits = self._landing_row(second_x)
        if first_fits and second_fits:
            self.set_cell(second_x, second_y, second_cell)
        else:
            self.set_cell(first_x, first_y, original)

    def ghost_position(self) -> tuple[Position, Position]:
        """Where the center and sub would land: ((cx, cy), (sx, sy))."""
        t = self.active_tsumo
        cx, sx = t.x, t.x + t.dx
        temp = [row[:] for row in self.grid]

        def fall(x: int) -> int:
            y = 0
            while (
                y + 1 < self.height
                and 0 <= x < self.width
                and temp[y + 1][x] is CellType.EMPTY
            ):
                y += 1
            return y

        def place(x: int, y: int, cell: CellType) -> None:
            if self._in_bounds(x, y):
                temp[y][x] = cell

        if t.dy == 1:
            sy = fall(sx)
            place(sx, sy, t.sub)
            cy = fall(cx)
        else:
            cy = fall(cx)
            place(cx, cy, t.center)
            sy = fall(sx)
        return (cx, cy), (sx, sy)

    def analyze_and_erase_chains(self, chain_count: int = 1) -> ChainInfo:
        """Erase every group of four or more and the garbage touching it."""
        info = ChainInfo(chain_count=chain_count)
        visited = [[False] * self.width for _ in range(self.height)]

        for y, row in enumerate(self.grid):
            for x, target in enumerate(row):
                if visited[y][x] or target in (CellType.EMPTY, CellType.GARBAGE):
                    continue

                connected: list[Position] = []
                garbages: list[Position] = []
                stack: list[Position] = [(x, y)]
                visited[y][x] = True

                while stack:
                    cx, cy = stack.pop()
                    connected.append((cx, cy))
                    for ddx, ddy in _NEIGHBOURS:
                        nx, ny = cx + ddx, cy + ddy
                        if not self._in_bounds(nx, ny) or visited[ny][nx]:
                            continue
                        neighbour = self.grid[ny][nx]
                        if neighbour is target:
                            visited[ny][nx] = True
                            stack.append((nx, ny))
                        elif neighbour is CellType.GARBAGE:
                            visited[ny][nx] = True
                            garbages.append((nx, ny))

                if len(connected) >= 4:
                    for ex, ey in connected + garbages:
                        self.grid[ey][ex] = CellType.EMPTY
                    info.group_sizes.append(len(connected))
                    info.colors.add(target)
                    info.total_erased += len(connected)
                    info.erased = True

        return info

    def apply_gravity(self) -> None:
        """Let every puyo fall to the bottom of its column, keeping order."""
        for x in range(self.width):
            column = [
                self.grid[y][x]
                for y in range(self.height)
                if self.grid[y][x] is not CellType.EMPTY
            ]
            empty_rows = self.height - len(column)
            for y in range(self.height):
                self.grid[y][x] = (
                    CellType.EMPTY if y < empty_rows else column[y - empty_rows]
                )

    def calculate_score(self, chain_info: ChainInfo) -> int:
        bonus = (
            chain_bonus(chain_info.chain_count)
            + sum(link_bonus(size) for size in chain_info.group_sizes)
            + color_bonus(len(chain_info.colors))
        )
        return chain_info.total_erased * (bonus or 1) * 10

    def update_score(self, chain_info: ChainInfo) -> None:
        self.score += self.calculate_score(chain_info)

    def generate_next_tsumo(self) -> None:
        """Promote the next pair to active and queue a fresh random pair."""
        center, sub = self.next_tsumos[0]
        self.set_active_tsumo(center, sub)
        self.set_next_tsumos(self.next_tsumos[1], random_tsumo(self.rng))