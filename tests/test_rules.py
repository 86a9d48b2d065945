import pytest

from tris_engine.game import ScoringRules


@pytest.fixture
def rules():
    return ScoringRules()


@pytest.mark.parametrize("lines, points", [(0, 0), (1, 100), (2, 300), (3, 500), (4, 800)])
def test_score_table_at_level_one(rules, lines, points):
    assert rules.score_for_lines(lines, 1) == points


def test_score_scales_with_level(rules):
    assert rules.score_for_lines(4, 3) == 2400
    assert rules.score_for_lines(1, 7) == 700


@pytest.mark.parametrize("lines, level", [(0, 1), (9, 1), (10, 2), (19, 2), (95, 10)])
def test_level_for_lines(rules, lines, level):
    assert rules.level_for_lines(lines) == level


@pytest.mark.parametrize("level, interval", [(1, 1000), (2, 900), (9, 200), (10, 100), (25, 100)])
def test_drop_interval_curve(rules, level, interval):
    assert rules.drop_interval_for_level(level) == interval


def test_rejects_short_score_table():
    with pytest.raises(ValueError):
        ScoringRules(line_clear_scores=(100, 300, 500, 800))


def test_rejects_non_positive_floor():
    with pytest.raises(ValueError):
        ScoringRules(min_interval_ms=0)
