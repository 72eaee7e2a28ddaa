import curses

import config
from game.game_logic import GameStatus


TITLE = "term48"
HELP_TEXT = "arrows/hjkl: move  q: quit"
BANNERS = {
    GameStatus.WON: "YOU WIN! keep going",
    GameStatus.LOST: "GAME OVER",
}

# --- 색상 쌍 번호 ---
TILE_PAIR_IDS = {value: i + 1 for i, value in enumerate(sorted(config.TILE_COLORS))}
SUPER_PAIR_ID = len(TILE_PAIR_IDS) + 1
BORDER_PAIR_ID = SUPER_PAIR_ID + 1
BANNER_PAIR_IDS = {
    GameStatus.WON: BORDER_PAIR_ID + 1,
    GameStatus.LOST: BORDER_PAIR_ID + 2,
}


class TerminalTooSmallError(Exception):
    def __init__(self, width, height):
        super().__init__(f"terminal too small, required minimum size {width} x {height}")
        self.width = width
        self.height = height


def _color(name):
    return getattr(curses, f"COLOR_{name.upper()}")


def init_colors():
    """curses.start_color() 이후에 한 번 호출해 색상 쌍을 등록합니다."""
    for value, pair_id in TILE_PAIR_IDS.items():
        fg, bg = config.TILE_COLORS[value]
        curses.init_pair(pair_id, _color(fg), _color(bg))
    curses.init_pair(SUPER_PAIR_ID, *map(_color, config.SUPER_TILE_COLOR))
    curses.init_pair(BORDER_PAIR_ID, *map(_color, config.BORDER_COLOR))
    curses.init_pair(BANNER_PAIR_IDS[GameStatus.WON], *map(_color, config.BANNER_COLORS["won"]))
    curses.init_pair(BANNER_PAIR_IDS[GameStatus.LOST], *map(_color, config.BANNER_COLORS["lost"]))


def tile_pair_id(value):
    return TILE_PAIR_IDS.get(value, SUPER_PAIR_ID)


def tile_label(value, width=config.TILE_WIDTH):
    """타일 가운데 줄에 들어갈 글자. 빈칸은 EMPTY_TILE_MARK."""
    text = str(value) if value else config.EMPTY_TILE_MARK
    return text.center(width)[:width]


def board_dimensions(size):
    """테두리를 포함한 보드의 (높이, 너비)."""
    height = size * config.TILE_HEIGHT + (size + 1) * config.TILE_GAP + 2
    width = size * config.TILE_WIDTH + (size + 1) * config.TILE_GAP + 2
    return height, width


def required_size(size):
    """화면 전체에 필요한 최소 (높이, 너비). 마지막 칸에 쓰지 않도록 한 칸 여유를 둡니다."""
    board_height, board_width = board_dimensions(size)
    height = config.BOARD_Y_OFFSET + board_height + 2
    width = max(config.BOARD_X_OFFSET + board_width, config.BOARD_X_OFFSET + len(HELP_TEXT)) + 1
    return height, width


def tile_origin(row, col):
    """(행, 열) 타일의 왼쪽 위 화면 좌표 (y, x)."""
    y = config.BOARD_Y_OFFSET + 1 + config.TILE_GAP + row * (config.TILE_HEIGHT + config.TILE_GAP)
    x = config.BOARD_X_OFFSET + 1 + config.TILE_GAP + col * (config.TILE_WIDTH + config.TILE_GAP)
    return y, x


def highlighted_positions(report):
    """직전 이동에서 합쳐진 칸과 새로 생긴 칸."""
    if report is None or not report.changed:
        return set()
    positions = {move.target for move in report.moves if move.merged}
    if report.spawn is not None:
        positions.add(report.spawn.position)
    return positions


class GameRenderer:
    """curses 화면에 점수, 보드, 상태 배너를 그립니다."""

    def __init__(self, stdscr, colors=True):
        self.stdscr = stdscr
        self.colors = colors

    def _attr(self, pair_id):
        return curses.color_pair(pair_id) if self.colors else curses.A_NORMAL

    def resize(self):
        self.stdscr.clear()

    def draw(self, snapshot, report=None):
        size = len(snapshot.cells)
        need_height, need_width = required_size(size)
        height, width = self.stdscr.getmaxyx()
        if height < need_height or width < need_width:
            raise TerminalTooSmallError(need_width, need_height)

        self.stdscr.erase()
        self.draw_header(snapshot)
        self.draw_border(size)
        highlights = highlighted_positions(report)
        for r, row in enumerate(snapshot.cells):
            for c, value in enumerate(row):
                self.draw_tile(r, c, value, (r, c) in highlights)

        board_height, _ = board_dimensions(size)
        self.stdscr.addstr(config.BOARD_Y_OFFSET + board_height + 1, config.BOARD_X_OFFSET, HELP_TEXT)
        self.stdscr.refresh()

    def draw_header(self, snapshot):
        self.stdscr.addstr(0, config.BOARD_X_OFFSET, TITLE, curses.A_BOLD)
        self.stdscr.addstr(0, config.BOARD_X_OFFSET + len(TITLE) + 3, f"Score: {snapshot.score}")
        banner = BANNERS.get(snapshot.status)
        if banner:
            attr = self._attr(BANNER_PAIR_IDS[snapshot.status]) | curses.A_BOLD
            self.stdscr.addstr(1, config.BOARD_X_OFFSET, f" {banner} ", attr)

    def draw_border(self, size):
        height, width = board_dimensions(size)
        top, left = config.BOARD_Y_OFFSET, config.BOARD_X_OFFSET
        attr = self._attr(BORDER_PAIR_ID)
        inner = width - 2
        self.stdscr.addstr(top, left, "╔" + "═" * inner + "╗", attr)
        for y in range(top + 1, top + height - 1):
            self.stdscr.addstr(y, left, "║", attr)
            self.stdscr.addstr(y, left + width - 1, "║", attr)
        self.stdscr.addstr(top + height - 1, left, "╚" + "═" * inner + "╝", attr)

    def draw_tile(self, row, col, value, highlight=False):
        y, x = tile_origin(row, col)
        attr = self._attr(tile_pair_id(value))
        if highlight:
            attr |= curses.A_BOLD
        blank = " " * config.TILE_WIDTH
        middle = config.TILE_HEIGHT // 2
        for dy in range(config.TILE_HEIGHT):
            text = tile_label(value) if dy == middle else blank
            self.stdscr.addstr(y + dy, x, text, attr)

    def draw_message(self, text):
        """보드를 그릴 수 없을 때 화면 왼쪽 위에 안내 문구만 보여줍니다."""
        height, width = self.stdscr.getmaxyx()
        self.stdscr.erase()
        if height > 0 and width > 1:
            self.stdscr.addstr(0, 0, text[:width - 1])
        self.stdscr.refresh()
