import math
import random

import pytest

from models import Option
from services.selection_service import choose


A = Option(label="A", weight=1.0)
B = Option(label="B", weight=3.0)
C = Option(label="C", weight=2.0)


def test_zero_draw_returns_first_option():
    assert choose([A, B, C], 0.0) is A
    assert choose([B, A], 0.0) is B


def test_draw_just_below_one_returns_last_option():
    almost_one = math.nextafter(1.0, 0.0)
    assert choose([A, B, C], almost_one) is C
    assert choose([C, A], almost_one) is A


def test_boundary_belongs_to_next_option():
    # total 4, r = 1.0 is where B's interval starts
    assert choose([A, B], 0.25) is B
    assert choose([A, B], 0.2499) is A


def test_single_option_always_wins():
    only = Option(label="Only", weight=0.5)
    for draw in (0.0, 0.3, 0.999):
        assert choose([only], draw) is only


def test_falls_back_to_last_option_when_walk_misses():
    # draw outside [0, 1) simulates rounding past the total
    assert choose([A, B], 1.0) is B


def test_empty_options_rejected():
    with pytest.raises(ValueError):
        choose([], 0.5)


def test_frequencies_follow_weights():
    rng = random.Random(42)
    draws = 40000
    picks_a = sum(1 for _ in range(draws) if choose([A, B], rng.random()) is A)

    assert picks_a / draws == pytest.approx(0.25, abs=0.02)


def test_overflowing_total_keeps_first_option_on_zero_draw():
    huge_a = Option(label="A", weight=1e308)
    huge_b = Option(label="B", weight=1e308)

    assert choose((huge_a, huge_b), 0.0) is huge_a
    assert choose((huge_a, huge_b), 0.25) is huge_a
    assert choose((huge_a, huge_b), 0.75) is huge_b


def test_overflowing_total_keeps_proportions():
    small = Option(label="A", weight=5e307)
    large = Option(label="B", weight=1.5e308)
    rng = random.Random(7)
    draws = 40000

    picks_small = sum(1 for _ in range(draws) if choose([small, large], rng.random()) is small)

    assert picks_small / draws == pytest.approx(0.25, abs=0.02)


def test_tiny_weights():
    tiny_a = Option(label="A", weight=1e-300)
    tiny_b = Option(label="B", weight=3e-300)

    assert choose([tiny_a, tiny_b], 0.0) is tiny_a
    assert choose([tiny_a, tiny_b], 0.2) is tiny_a
    assert choose([tiny_a, tiny_b], 0.5) is tiny_b
