import argparse
import curses
import locale
import logging
import random
import sys

import config
from game.game_logic import new_game
from ui.app import App
from ui.events import CursesEventSource
from ui.renderer import GameRenderer, init_colors

logger = logging.getLogger("term48")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="term48", description="Terminal 2048")
    parser.add_argument("--seed", type=int, default=None, help="타일 생성 난수 시드")
    parser.add_argument("--log-file", default=config.LOG_FILE, help="로그 파일 경로")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v: INFO, -vv: DEBUG")
    parser.add_argument("-q", "--quiet", action="store_true", help="ERROR 이상만 기록")
    return parser.parse_args(argv)


def log_level(args):
    if args.quiet:
        return logging.ERROR
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    return logging.WARNING


# --- 로깅 설정 ---
# curses 가 터미널을 쓰므로 로그는 파일로만 남깁니다.
def setup_logging(args):
    logging.basicConfig(
        filename=args.log_file,
        level=log_level(args),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )


def run(stdscr, args):
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("커서를 숨길 수 없는 터미널입니다")

    colors = curses.has_colors()
    if colors:
        curses.start_color()
        init_colors()

    game = new_game(rng=random.Random(args.seed))
    app = App(game, GameRenderer(stdscr, colors=colors), CursesEventSource(stdscr))
    return app.run()


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args)
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        logger.warning("로케일을 설정할 수 없어 테두리가 깨질 수 있습니다")
    logger.info("시작: seed=%s", args.seed)

    try:
        snapshot = curses.wrapper(run, args)
    except KeyboardInterrupt:
        logger.info("키보드 인터럽트로 종료합니다.")
        return 0
    except Exception:
        logger.exception("치명적 예외로 종료합니다.")
        raise

    print(f"Score: {snapshot.score} ({snapshot.status.name})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
