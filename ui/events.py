import curses
import logging
from collections import namedtuple
from enum import Enum

import config
from game.board import Direction

logger = logging.getLogger(__name__)


class EventKind(Enum):
    DIRECTION = "direction"
    QUIT = "quit"
    RESIZE = "resize"


Event = namedtuple("Event", ["kind", "direction"])

# curses 특수 키 코드 -> config.KEY_BINDINGS 의 이름
SPECIAL_KEY_NAMES = {
    curses.KEY_UP: "KEY_UP",
    curses.KEY_DOWN: "KEY_DOWN",
    curses.KEY_LEFT: "KEY_LEFT",
    curses.KEY_RIGHT: "KEY_RIGHT",
    curses.KEY_RESIZE: "KEY_RESIZE",
}

DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def translate_key(key, bindings=None):
    """
    getch() 로 읽은 키를 Event 로 바꿉니다. 바인딩이 없는 키는 None.

    key 는 curses 의 정수 키 코드나 한 글자 문자열입니다.
    """
    bindings = config.KEY_BINDINGS if bindings is None else bindings
    if isinstance(key, int):
        if key in SPECIAL_KEY_NAMES:
            name = SPECIAL_KEY_NAMES[key]
        elif 0 <= key < 256:
            name = chr(key)
        else:
            return None
    else:
        name = key

    action = bindings.get(name)
    if action is None:
        return None
    if action == "quit":
        return Event(EventKind.QUIT, None)
    if action == "resize":
        return Event(EventKind.RESIZE, None)
    return Event(EventKind.DIRECTION, DIRECTIONS[action])


class CursesEventSource:
    """curses 화면에서 다음 입력 이벤트를 기다리는 입력 어댑터."""

    def __init__(self, stdscr, bindings=None):
        self.stdscr = stdscr
        self.bindings = bindings

    def next_event(self):
        while True:
            key = self.stdscr.getch()
            event = translate_key(key, self.bindings)
            if event is not None:
                return event
            logger.debug("무시한 키: %r", key)
