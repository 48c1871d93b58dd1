"""Unit tests for the synthetic rack."""

import pytest

from bankshot.core.models import TableGeometry
from bankshot.core.rack import create_synthetic_rack, find_ball


def test_rack_has_cue_and_fifteen_balls():
    balls = create_synthetic_rack()
    assert len(balls) == 16
    assert sorted(ball.number for ball in balls) == list(range(16))
    assert [ball.number for ball in balls if ball.is_cue_ball] == [0]


def test_cue_ball_on_head_string():
    cue = find_ball(create_synthetic_rack(), 0)
    assert cue.position == pytest.approx((559.0, 558.75))
    assert cue.color == "white"


def test_apex_ball_on_foot_spot():
    apex = find_ball(create_synthetic_rack(), 1)
    assert apex.position == pytest.approx((559.0, 1676.25))
    assert not apex.is_striped


def test_eight_ball_in_center_of_third_row():
    rack = create_synthetic_rack()
    eight = find_ball(rack, 8)
    apex = find_ball(rack, 1)
    assert eight.x == pytest.approx(apex.x)
    assert eight.y == pytest.approx(apex.y + 2 * 57.15 * 0.866)


def test_stripes():
    striped = {ball.number for ball in create_synthetic_rack() if ball.is_striped}
    assert striped == set(range(9, 16))


def test_all_balls_on_table():
    table = TableGeometry.standard()
    for ball in create_synthetic_rack(table):
        assert table.is_on_table(ball.position)


def test_rack_follows_table_size():
    table = TableGeometry(width=1270.0, length=2540.0)
    apex = find_ball(create_synthetic_rack(table), 1)
    assert apex.position == pytest.approx((635.0, 1905.0))


def test_find_ball_missing():
    with pytest.raises(KeyError):
        find_ball(create_synthetic_rack(), 16)
