from datetime import datetime, timezone


FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class SequenceRandom:
    """Stand-in random source that replays the given draws in a loop."""

    def __init__(self, draws):
        self._draws = list(draws)
        self._index = 0

    def random(self):
        draw = self._draws[self._index % len(self._draws)]
        self._index += 1
        return draw
