import pytest

from rastershapes import FixedColour, RandomSource, rgba


class Recorder:
    """A Displayable that remembers every write instead of storing pixels."""

    def __init__(self):
        self.writes = []

    def display(self, x, y, colour):
        self.writes.append((x, y, colour))

    @property
    def coords(self):
        return [(x, y) for x, y, _ in self.writes]


class CountingColour:
    """Hands out a different colour on each call so tests can count requests."""

    def __init__(self):
        self.calls = 0

    def colour(self):
        self.calls += 1
        return rgba(self.calls % 256, 0, 0)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def counting_colour() -> CountingColour:
    return CountingColour()


@pytest.fixture
def rng() -> RandomSource:
    return RandomSource(1234)


@pytest.fixture
def black() -> rgba:
    return rgba(0, 0, 0)


@pytest.fixture
def white() -> rgba:
    return rgba(255, 255, 255)


@pytest.fixture
def red() -> rgba:
    return rgba(255, 0, 0)


@pytest.fixture
def solid_red(red) -> FixedColour:
    return FixedColour(red)
