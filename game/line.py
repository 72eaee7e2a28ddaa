from collections import namedtuple

# cells: 결과 라인, moves: (출발 인덱스, 도착 인덱스, 병합 여부) 목록
LineResult = namedtuple("LineResult", ["cells", "score_delta", "changed", "moves"])


def slide_line(line):
    """
    한 줄(행 또는 열)을 시작 쪽으로 밀고 같은 값을 합칩니다.

    라인은 이미 이동 방향 순서로 정렬되어 있어야 합니다 (인덱스 0 이 벽 쪽).
    각 타일은 한 번의 이동에서 최대 한 번만 합쳐집니다. 예를 들어 [2, 2, 2] 는
    [4, 2, 0] 이 되고, [2, 2, 2, 2] 는 [4, 4, 0, 0] 이 됩니다.

    Args:
        line: 정수 값 시퀀스. 0 은 빈칸.

    Returns:
        LineResult: 새 라인, 점수 증가분(합쳐진 타일의 원래 값 합),
        변경 여부, 타일별 이동 기록.
    """
    size = len(line)
    cells = []
    moves = []
    score_delta = 0
    # 마지막으로 쓴 칸이 이번 스캔에서 병합으로 만들어졌다면 다시 합칠 수 없음
    last_merged = False

    for source, value in enumerate(line):
        value = int(value)
        if value == 0:
            continue
        if cells and cells[-1] == value and not last_merged:
            cells[-1] = value * 2
            score_delta += value
            last_merged = True
            target = len(cells) - 1
            # 흡수한 쪽 타일도 병합으로 표시
            prev_source, prev_target, _ = moves[-1]
            moves[-1] = (prev_source, prev_target, True)
            moves.append((source, target, True))
        else:
            cells.append(value)
            last_merged = False
            moves.append((source, len(cells) - 1, False))

    cells.extend([0] * (size - len(cells)))
    changed = any(int(old) != new for old, new in zip(line, cells))
    return LineResult(cells, score_delta, changed, moves)
