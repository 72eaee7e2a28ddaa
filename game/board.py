from collections import namedtuple
from enum import IntEnum

import numpy as np

import config
from game.errors import InvalidBoardError
from game.line import slide_line


class Direction(IntEnum):
    """이동 방향. 0:상, 1:하, 2:좌, 3:우"""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


# source / target 은 (행, 열) 좌표, value 는 도착 칸의 최종 값
TileMove = namedtuple("TileMove", ["source", "target", "value", "merged"])
MoveOutcome = namedtuple("MoveOutcome", ["board", "changed", "score_delta", "moves"])


def _is_valid_cells(cells):
    """모든 칸이 0 이거나 2 이상의 2의 거듭제곱인지 확인합니다."""
    powers = (cells >= 2) & ((cells & (cells - 1)) == 0)
    return bool(np.all((cells == 0) | powers))


def is_tile_value(value):
    """value 가 놓일 수 있는 타일 값(2 이상의 2의 거듭제곱)인지 확인합니다."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    value = int(value)
    return value >= 2 and value & (value - 1) == 0


class Board:
    """N x N 타일 보드. 0 은 빈칸이며 (0, 0) 은 왼쪽 위입니다."""

    def __init__(self, size=config.BOARD_SIZE):
        if size < 1:
            raise InvalidBoardError(f"보드 크기는 1 이상이어야 합니다: {size}")
        self.cells = np.zeros((size, size), dtype=int)

    @classmethod
    def from_rows(cls, rows):
        """중첩 리스트(또는 배열)로부터 보드를 만듭니다. 형식이 잘못되면 InvalidBoardError."""
        try:
            raw = np.asarray(rows)
        except (TypeError, ValueError) as exc:
            raise InvalidBoardError(f"보드로 변환할 수 없습니다: {rows!r}") from exc
        # 2.9 같은 실수가 2 로 잘리지 않도록 정수 배열만 받음
        if not np.issubdtype(raw.dtype, np.integer):
            raise InvalidBoardError(f"타일 값은 정수여야 합니다: dtype={raw.dtype}")
        cells = raw.astype(int)
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1] or cells.shape[0] < 1:
            raise InvalidBoardError(f"정사각형 보드가 아닙니다: shape={cells.shape}")
        if not _is_valid_cells(cells):
            raise InvalidBoardError("타일 값은 0 또는 2 이상의 2의 거듭제곱이어야 합니다")
        return cls._wrap(cells)

    @classmethod
    def _wrap(cls, cells):
        board = cls.__new__(cls)
        board.cells = cells
        return board

    @property
    def size(self):
        return self.cells.shape[0]

    def copy(self):
        return Board._wrap(np.copy(self.cells))

    def __getitem__(self, position):
        return int(self.cells[position])

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __repr__(self):
        return f"Board({self.to_list()!r})"

    def to_list(self):
        return self.cells.tolist()

    def empty_cells(self):
        """비어있는 칸의 위치를 (행, 열) 튜플 리스트로 반환합니다. 순서는 행 우선."""
        return [(int(r), int(c)) for r, c in zip(*np.where(self.cells == 0))]

    def is_full(self):
        return not np.any(self.cells == 0)

    def max_tile(self):
        return int(np.max(self.cells))

    def contains(self, value):
        return bool(np.any(self.cells == value))

    def place(self, position, value):
        """빈칸 하나에 타일을 놓습니다. 타일 생성 정책만 사용합니다."""
        if not is_tile_value(value):
            raise InvalidBoardError(f"타일 값은 2 이상의 2의 거듭제곱이어야 합니다: {value!r}")
        if self.cells[position] != 0:
            raise InvalidBoardError(f"{position} 칸은 이미 차 있습니다")
        self.cells[position] = value

    def has_moves(self):
        """어느 방향으로든 보드가 바뀔 수 있으면 True."""
        return any(self.apply_move(direction).changed for direction in Direction)

    def apply_move(self, direction):
        """
        주어진 방향으로 모든 줄을 밀고 합친 결과를 계산합니다.
        이 보드는 바뀌지 않으며, 적용 여부는 호출하는 쪽이 결정합니다.
        """
        direction = Direction(direction)
        new_cells = np.zeros_like(self.cells)
        score_delta = 0
        changed = False
        moves = []

        for index in range(self.size):
            positions = self._line_positions(index, direction)
            result = slide_line([self.cells[pos] for pos in positions])
            for pos, value in zip(positions, result.cells):
                new_cells[pos] = value
            score_delta += result.score_delta
            changed = changed or result.changed

            for source, target, merged in result.moves:
                if source == target and not merged:
                    continue
                moves.append(TileMove(positions[source], positions[target],
                                      result.cells[target], merged))

        return MoveOutcome(Board._wrap(new_cells), changed, score_delta, tuple(moves))

    def _line_positions(self, index, direction):
        """index 번째 줄의 좌표를 이동 방향 순서(벽 쪽이 먼저)로 반환합니다."""
        n = self.size
        if direction == Direction.UP:  # 위 -> 아래
            return [(r, index) for r in range(n)]
        elif direction == Direction.DOWN:  # 아래 -> 위
            return [(r, index) for r in reversed(range(n))]
        elif direction == Direction.LEFT:  # 왼쪽 -> 오른쪽
            return [(index, c) for c in range(n)]
        else:  # 오른쪽 -> 왼쪽
            return [(index, c) for c in reversed(range(n))]
