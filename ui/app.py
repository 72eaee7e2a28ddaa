import logging

from ui.events import EventKind
from ui.renderer import TerminalTooSmallError

logger = logging.getLogger(__name__)

RESIZE_MESSAGE = "terminal too small, please resize ({width} x {height} needed)"


class App:
    """
    입력 -> 게임 -> 화면 순서로 한 번에 하나의 이벤트를 처리하는 메인 루프.

    게임 상태는 생성자로 받은 game 하나뿐이며, 루프가 끝나면 마지막 snapshot 을 돌려줍니다.
    """

    def __init__(self, game, renderer, events):
        self.game = game
        self.renderer = renderer
        self.events = events

    def render(self, report=None):
        try:
            self.renderer.draw(self.game.snapshot(), report)
        except TerminalTooSmallError as e:
            logger.warning("화면이 너무 작습니다: %s", e)
            self.renderer.draw_message(RESIZE_MESSAGE.format(width=e.width, height=e.height))

    def run(self):
        report = None
        while True:
            self.render(report)
            event = self.events.next_event()

            if event.kind is EventKind.QUIT:
                logger.info("종료 요청 (점수 %d, 상태 %s)", self.game.score, self.game.status.name)
                return self.game.snapshot()
            if event.kind is EventKind.RESIZE:
                self.renderer.resize()
                report = None
                continue

            report = self.game.request_move(event.direction)
            if not report.changed:
                logger.debug("%s 방향으로는 움직일 수 없습니다", event.direction.name)
