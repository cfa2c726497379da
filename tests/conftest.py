from collections import deque

import pytest

from iching_daily.casting import Line
from iching_daily.codec import decode, to_binary
from iching_daily.entropy import EntropySource

# Low-bit coin patterns that produce each line value
LINE_BYTES = {6: 0b000, 7: 0b001, 8: 0b011, 9: 0b111}


class ScriptedEntropy(EntropySource):
    """Replays fixed bytes and uniform draws; fails loudly when exhausted."""

    def __init__(self, data=b"", draws=()):
        self.data = deque(bytes(data))
        self.draws = deque(draws)

    def bytes(self, n):
        if len(self.data) < n:
            raise AssertionError(f"Scripted entropy exhausted (wanted {n} bytes)")
        return bytes(self.data.popleft() for _ in range(n))

    def uniform(self):
        if not self.draws:
            raise AssertionError("Scripted uniform draws exhausted")
        return self.draws.popleft()

    def feed(self, data=b"", draws=()):
        self.data.extend(bytes(data))
        self.draws.extend(draws)


def cast_bytes(values):
    """Bytes that make LineCaster cast ``values`` bottom to top."""
    return bytes(LINE_BYTES[v] for v in values)


def lines_of(values):
    return [Line(v) for v in values]


def stable_lines(number):
    """Non-changing lines for a King Wen number."""
    return [Line(7 if bit else 8) for bit in decode(to_binary(number))]


@pytest.fixture
def scripted():
    return ScriptedEntropy()
