"""Stack-based puzzles: bracket matching, paths, collisions and history navigation."""

import re
from dataclasses import dataclass, field

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())
_PATH_SEGMENT = re.compile(r".[^/]*", re.DOTALL)


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer and
    must match the most recent open bracket.
    """
    stack = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack or _PAIRS.get(ch) != stack.pop():
            return False
    return not stack


def simplify_path(path: str) -> str:
    """Reduce a slash-separated path by resolving ``.``, ``..`` and repeated slashes."""
    parts = []
    for segment in _PATH_SEGMENT.findall(path):
        if segment in ("/", "/."):
            continue
        if segment != "/..":
            parts.append(segment)
        elif parts:
            parts.pop()
    return "".join(parts) if parts else "/"


def remove_k_digits(num: str, k: int) -> str:
    """Remove ``k`` digits from ``num`` to leave the smallest possible number."""
    stack = []
    for digit in num:
        while k > 0 and stack and stack[-1] > digit:
            stack.pop()
            k -= 1
        stack.append(digit)
    if k > 0:
        del stack[max(len(stack) - k, 0):]
    return "".join(stack).lstrip("0") or "0"


def asteroid_collision(asteroids: list) -> list:
    """Return the asteroids left after all collisions.

    Positive values move right, negative ones left; on impact the smaller
    one is destroyed, and equal sizes destroy each other.
    """
    stack = []
    for rock in asteroids:
        if rock > 0:
            stack.append(rock)
            continue
        while stack and 0 < stack[-1] < abs(rock):
            stack.pop()
        if not stack or stack[-1] < 0:
            stack.append(rock)
        elif stack[-1] == -rock:
            stack.pop()
    return stack


def daily_temperatures(temperatures: list) -> list:
    """For each day, return how many days until a warmer one, or 0 if none follows."""
    waits = [0] * len(temperatures)
    pending = []
    for day, temperature in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temperature:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits


def car_fleet(target: int, position: list, speed: list) -> int:
    """Return how many fleets of cars arrive at ``target``."""
    if len(position) != len(speed):
        raise ValueError("position and speed must have the same length")
    if any(s == 0 for s in speed):
        raise ValueError("speed must not be zero")
    cars = sorted(zip(position, speed), key=lambda car: car[0], reverse=True)
    arrivals = []
    for pos, spd in cars:
        time = (target - pos) / spd
        if arrivals and time <= arrivals[-1]:
            continue
        arrivals.append(time)
    return len(arrivals)


def min_add_to_make_valid(s: str) -> int:
    """Return how many parentheses must be added to make ``s`` balanced."""
    stack = []
    for ch in s:
        if stack and ch == ")" and stack[-1] == "(":
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def is_valid_abc(s: str) -> bool:
    """Return True if ``s`` can be built by repeatedly inserting ``"abc"``."""
    if not s.startswith("a"):
        return False
    stack = []
    for ch in s:
        if ch == "a":
            stack.append(ch)
        elif ch == "b":
            if not stack or stack[-1] != "a":
                return False
            stack.append(ch)
        else:
            if not stack or stack[-1] != "b":
                return False
            stack.pop()
            if not stack or stack[-1] != "a":
                return False
            stack.pop()
    return not stack


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    kept = []
    for ch in s:
        if kept and kept[-1] == ch:
            kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


@dataclass
class MinStack:
    """A stack that reports its smallest item in constant time."""

    _items: list = field(default_factory=list, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val) -> None:
        """Push ``val`` on top of the stack."""
        smallest = min(self._items[-1][1], val) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> None:
        """Remove the top item."""
        if not self._items:
            raise IndexError("pop from empty stack")
        self._items.pop()

    def top(self):
        """Return the top item."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self):
        """Return the smallest item on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]


@dataclass
class StockSpanner:
    """Reports, for each new price, how many consecutive days it has been at or above."""

    _history: list = field(default_factory=list, init=False, repr=False)

    def next(self, price) -> int:
        """Record ``price`` and return its span."""
        span = 1
        while self._history and self._history[-1][0] <= price:
            span += self._history.pop()[1]
        self._history.append((price, span))
        return span


class BrowserHistory:
    """Back and forward navigation over visited pages."""

    def __init__(self, homepage: str) -> None:
        self._back = [homepage]
        self._forward = []

    @property
    def current(self) -> str:
        """The page now shown."""
        return self._back[-1]

    def visit(self, url: str) -> None:
        """Go to ``url``, discarding any forward history."""
        self._forward.clear()
        self._back.append(url)

    def back(self, steps: int) -> str:
        """Move back up to ``steps`` pages and return the current page."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        for _ in range(min(steps, len(self._back) - 1)):
            self._forward.append(self._back.pop())
        return self.current

    def forward(self, steps: int) -> str:
        """Move forward up to ``steps`` pages and return the current page."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        for _ in range(min(steps, len(self._forward))):
            self._back.append(self._forward.pop())
        return self.current