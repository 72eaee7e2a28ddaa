import logging
import random
from collections import namedtuple
from enum import Enum

import config
from game.board import Board, Direction
from game.errors import InvalidBoardError
from game.spawn import SpawnPolicy

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"    # 정보용 상태. 계속 플레이할 수 있음
    LOST = "lost"  # 종료 상태


MoveReport = namedtuple(
    "MoveReport",
    ["previous_status", "status", "score_delta", "changed", "moves", "spawn"],
)
Snapshot = namedtuple("Snapshot", ["cells", "score", "status"])


class Game2048:
    """
    보드, 점수, 상태를 묶은 한 판의 게임입니다.

    보드는 이 객체만 바꿀 수 있으며, 화면 쪽은 snapshot() 으로 상태를 읽고
    request_move() 로만 명령을 보냅니다.
    """

    def __init__(self, size=config.BOARD_SIZE, rng=None, spawn_policy=None, win_tile=config.WIN_TILE):
        if size * size < config.INITIAL_TILES:
            raise InvalidBoardError(
                f"{size}x{size} 보드에는 시작 타일 {config.INITIAL_TILES}개를 놓을 수 없습니다")
        self.size = size
        self.rng = rng if rng is not None else random.Random()
        self.spawn_policy = spawn_policy if spawn_policy is not None else SpawnPolicy()
        self.win_tile = win_tile
        self.reset()

    @classmethod
    def from_board(cls, rows, score=0, rng=None, spawn_policy=None, win_tile=config.WIN_TILE):
        """주어진 보드 상태에서 시작하는 게임을 만듭니다. 상태는 PLAYING 으로 시작합니다."""
        board = rows.copy() if isinstance(rows, Board) else Board.from_rows(rows)
        if score < 0:
            raise InvalidBoardError(f"점수는 음수일 수 없습니다: {score}")
        game = cls.__new__(cls)
        game.size = board.size
        game.rng = rng if rng is not None else random.Random()
        game.spawn_policy = spawn_policy if spawn_policy is not None else SpawnPolicy()
        game.win_tile = win_tile
        game._board = board
        game.score = score
        game.status = GameStatus.PLAYING
        game.last_spawn = None
        return game

    def reset(self):
        """게임을 초기 상태로 리셋합니다."""
        self._board = Board(self.size)
        self.score = 0
        self.status = GameStatus.PLAYING
        self.last_spawn = None
        for _ in range(config.INITIAL_TILES):
            self.last_spawn = self.spawn_policy.spawn(self._board, self.rng)
        logger.info("새 게임 시작 (size=%d)", self.size)

    @property
    def board(self):
        """현재 보드의 복사본."""
        return self._board.copy()

    @property
    def game_over(self):
        return self.status is GameStatus.LOST

    @property
    def win(self):
        return self.status is GameStatus.WON

    def snapshot(self):
        return Snapshot(self._board.to_list(), self.score, self.status)

    def request_move(self, direction):
        """
        한 번의 이동을 처리합니다.

        보드가 바뀌지 않는 이동은 점수도 새 타일도 만들지 않습니다.
        LOST 이후의 요청은 아무 일도 하지 않습니다.
        """
        direction = Direction(direction)
        previous = self.status
        if self.status is GameStatus.LOST:
            return MoveReport(previous, self.status, 0, False, (), None)

        outcome = self._board.apply_move(direction)
        if not outcome.changed:
            # 꽉 찬 보드에서 아무 방향도 통하지 않으면 여기서 패배 판정
            if self._board.is_full() and not self._board.has_moves():
                self._set_status(GameStatus.LOST)
            return MoveReport(previous, self.status, 0, False, (), None)

        self._board = outcome.board
        self.score += outcome.score_delta
        logger.debug("%s 이동: +%d점 (총 %d)", direction.name, outcome.score_delta, self.score)

        if self.status is GameStatus.PLAYING and self._board.max_tile() >= self.win_tile:
            self._set_status(GameStatus.WON)

        spawn = self.spawn_policy.spawn(self._board, self.rng)
        self.last_spawn = spawn

        if self._board.is_full() and not self._board.has_moves():
            self._set_status(GameStatus.LOST)

        return MoveReport(previous, self.status, outcome.score_delta, True, outcome.moves, spawn)

    def _set_status(self, status):
        logger.info("상태 변경: %s -> %s (점수 %d)", self.status.name, status.name, self.score)
        self.status = status


def new_game(size=config.BOARD_SIZE, rng=None, spawn_policy=None, win_tile=config.WIN_TILE):
    """타일 두 개가 놓인 새 게임을 만듭니다."""
    return Game2048(size=size, rng=rng, spawn_policy=spawn_policy, win_tile=win_tile)
