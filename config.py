# --- 게임 보드 설정 ---
BOARD_SIZE = 4
WIN_TILE = 2048
INITIAL_TILES = 2

# --- 타일 생성 설정 ---
# 새 타일은 대부분 2, 가끔 4
SPAWN_VALUES = (2, 4)
SPAWN_TWO_PROBABILITY = 0.9

# --- 화면 및 UI 설정 ---
TILE_WIDTH = 8   # 타일 하나의 가로 글자 수
TILE_HEIGHT = 3  # 타일 하나의 세로 줄 수
TILE_GAP = 1     # 타일 사이 간격
BOARD_X_OFFSET = 2
BOARD_Y_OFFSET = 3
EMPTY_TILE_MARK = "."

# --- 타일 색상 ---
# 값 -> (글자색, 배경색). curses 의 COLOR_* 이름을 사용합니다.
TILE_COLORS = {
    0: ("white", "black"),
    2: ("black", "white"),
    4: ("black", "cyan"),
    8: ("white", "green"),
    16: ("black", "yellow"),
    32: ("white", "red"),
    64: ("white", "magenta"),
    128: ("white", "blue"),
    256: ("black", "cyan"),
    512: ("black", "green"),
    1024: ("black", "yellow"),
    2048: ("white", "red"),
}
SUPER_TILE_COLOR = ("yellow", "black")  # 2048 보다 큰 타일
BORDER_COLOR = ("white", "black")
BANNER_COLORS = {
    "won": ("black", "yellow"),
    "lost": ("white", "red"),
}

# --- 키 설정 ---
KEY_BINDINGS = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "k": "up",
    "j": "down",
    "h": "left",
    "l": "right",
    "q": "quit",
    "KEY_RESIZE": "resize",
}

# --- 로깅 설정 ---
LOG_FILE = "term48.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
