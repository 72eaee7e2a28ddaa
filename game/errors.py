class GameError(Exception):
    """게임 엔진에서 발생하는 모든 예외의 기본 클래스입니다."""


class SpawnError(GameError):
    """빈칸이 없는 보드에 새 타일을 놓으려 할 때 발생합니다.

    정상적인 게임 진행에서는 일어나지 않으며, 호출하는 쪽의 버그를 뜻합니다.
    """


class InvalidBoardError(GameError):
    """정사각형이 아니거나 2의 거듭제곱이 아닌 값이 들어 있는 보드입니다."""
