"""테스트용 보조 객체들."""


class ScriptedRandom:
    """
    정해둔 값을 차례로 돌려주는 난수원.

    randrange(stop) 는 indices 에서, random() 은 floats 에서 꺼냅니다.
    준비한 값이 모자라면 AssertionError 를 내므로, 타일이 생성되지 않아야 하는
    테스트에서는 빈 목록을 넘기면 됩니다.
    """

    def __init__(self, indices=(), floats=()):
        self.indices = list(indices)
        self.floats = list(floats)

    def randrange(self, stop):
        if not self.indices:
            raise AssertionError("randrange() 가 예상보다 많이 호출되었습니다")
        index = self.indices.pop(0)
        if not 0 <= index < stop:
            raise AssertionError(f"스크립트 인덱스 {index} 가 범위 [0, {stop}) 밖입니다")
        return index

    def random(self):
        if not self.floats:
            raise AssertionError("random() 이 예상보다 많이 호출되었습니다")
        return self.floats.pop(0)


class FakeScreen:
    """curses 화면 흉내. addstr 로 쓴 글자를 격자에 기록합니다."""

    def __init__(self, height, width, keys=()):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.refreshes = 0
        self.clears = 0
        self.erase()

    def erase(self):
        self.grid = [[" "] * self.width for _ in range(self.height)]

    def clear(self):
        self.clears += 1
        self.erase()

    def refresh(self):
        self.refreshes += 1

    def getmaxyx(self):
        return self.height, self.width

    def getch(self):
        return self.keys.pop(0)

    def addstr(self, y, x, text, attr=0):
        if not 0 <= y < self.height or x < 0 or x + len(text) > self.width:
            raise AssertionError(f"화면 밖에 쓰기: ({y}, {x}) {text!r}")
        for i, ch in enumerate(text):
            self.grid[y][x + i] = ch

    def line(self, y):
        return "".join(self.grid[y])

    def text(self):
        return "\n".join(self.line(y) for y in range(self.height))
