import logging
from collections import namedtuple

import config
from game.board import is_tile_value
from game.errors import SpawnError

logger = logging.getLogger(__name__)

Spawn = namedtuple("Spawn", ["position", "value"])


class SpawnPolicy:
    """
    이동 후 새 타일을 놓는 정책입니다.

    빈칸 중 하나를 균등하게 고르고, two_probability 확률로 values[0] (보통 2),
    나머지 확률로 values[1] (보통 4) 을 놓습니다. 난수원은 항상 인자로 받으며,
    randrange(stop) 과 random() 만 있으면 됩니다 (random.Random 호환).
    """

    def __init__(self, two_probability=config.SPAWN_TWO_PROBABILITY, values=config.SPAWN_VALUES):
        if not 0.0 <= two_probability <= 1.0:
            raise ValueError(f"two_probability 는 0 과 1 사이여야 합니다: {two_probability}")
        values = tuple(values)
        if len(values) != 2:
            raise ValueError(f"타일 값은 정확히 두 개여야 합니다: {values}")
        for value in values:
            if not is_tile_value(value):
                raise ValueError(f"타일 값은 2 이상의 2의 거듭제곱이어야 합니다: {value!r}")
        self.two_probability = two_probability
        self.values = values

    def choose_value(self, rng):
        return self.values[0] if rng.random() < self.two_probability else self.values[1]

    def spawn(self, board, rng):
        """보드의 빈칸 하나에 새 타일을 놓고 Spawn 을 반환합니다."""
        empty_tiles = board.empty_cells()
        if not empty_tiles:
            raise SpawnError("빈칸이 없는 보드에는 타일을 생성할 수 없습니다")

        position = empty_tiles[rng.randrange(len(empty_tiles))]
        value = self.choose_value(rng)
        board.place(position, value)
        logger.debug("새 타일 %d 생성: %s", value, position)
        return Spawn(position, value)
