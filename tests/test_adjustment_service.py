import pytest

from score_adjuster.config import create_config
from score_adjuster.services import (
    BaselineService, CohortStatisticsService, ScoreAdjustmentService
)
from score_adjuster.services.adjustment_service import COHORT, ESTIMATED, UNKNOWN


def _adjust(items, config):
    cohort_stats = CohortStatisticsService(config).build_cohort_stats(items)
    baseline = BaselineService(config).build_baseline(items)
    ranked, sources = ScoreAdjustmentService(config).adjust(items, cohort_stats, baseline)
    return {item.id: item for item in ranked}, ranked, sources, baseline


def test_top_of_later_year_maps_onto_baseline(scenario_items, scenario_config):
    by_id, _, _, _ = _adjust(scenario_items, scenario_config)
    top = by_id[8]  # 8.5 in 2015: 4 of 5 strictly below -> 80th percentile

    assert top.percentile_in_year == 80.0
    # 80th percentile of [7.0, 7.5, 8.0]: position 1.6 -> 7.8
    assert top.adjusted_score == pytest.approx(7.8)
    assert top.score_difference == pytest.approx(-0.7)
    assert top.adjusted_rank == 1


def test_scenario_scores_under_inflation_only(scenario_items, scenario_config):
    by_id, _, sources, _ = _adjust(scenario_items, scenario_config)

    expected = {1: 7.0, 2: 7.33, 3: 7.67, 4: 6.0, 5: 6.5, 6: 7.0, 7: 7.6, 8: 7.8}
    for item_id, score in expected.items():
        assert by_id[item_id].adjusted_score == pytest.approx(score)
    assert sources == {COHORT: 8, ESTIMATED: 0, UNKNOWN: 0}


def test_bidirectional_policy_lets_scores_rise(scenario_items, scenario_config):
    config = scenario_config.with_overrides(allow_score_increases=True)
    by_id, _, _, _ = _adjust(scenario_items, config)

    # 6.0 is the minimum of 2015 -> baseline minimum 7.0
    assert by_id[4].adjusted_score == pytest.approx(7.0)
    assert by_id[4].score_difference == pytest.approx(1.0)
    assert by_id[5].adjusted_score == pytest.approx(7.2)
    assert by_id[8].adjusted_score == pytest.approx(7.8)


def test_inflation_only_never_raises_a_score(random_items):
    config = create_config(2008, 2010, min_scoring_users=0)
    _, ranked, _, _ = _adjust(random_items, config)
    assert all(item.adjusted_score <= item.mean for item in ranked)


def test_ranks_are_a_permutation(random_items):
    config = create_config(2008, 2010, min_scoring_users=0, allow_score_increases=True)
    _, ranked, _, _ = _adjust(random_items, config)

    assert sorted(item.adjusted_rank for item in ranked) == list(range(1, len(random_items) + 1))
    scores = [item.adjusted_score for item in ranked]
    assert scores == sorted(scores, reverse=True)


def test_equal_scores_keep_input_order(scenario_items, scenario_config):
    by_id, _, _, _ = _adjust(scenario_items, scenario_config)
    # Item 1 (2010) and item 6 (2015) both end at 7.0
    assert by_id[1].adjusted_score == by_id[6].adjusted_score
    assert by_id[1].adjusted_rank + 1 == by_id[6].adjusted_rank


def test_unknown_year_maps_to_baseline_median(scenario_items, scenario_config, make_item):
    items = scenario_items + [make_item(99, 9.0, None)]
    by_id, _, sources, baseline = _adjust(items, scenario_config)

    assert by_id[99].percentile_in_year == 50.0
    assert by_id[99].adjusted_score == baseline.median == 7.5
    assert sources[UNKNOWN] == 1


def test_sparse_year_uses_estimator(scenario_items, scenario_config, make_item):
    items = scenario_items + [make_item(42, 8.0, 2012)]
    by_id, _, sources, _ = _adjust(items, scenario_config)

    # estimate_percentile(8.0) = 70 -> position 1.4 -> 7.7
    assert by_id[42].percentile_in_year == 70.0
    assert by_id[42].adjusted_score == pytest.approx(7.7)
    assert sources[ESTIMATED] == 1


def test_caps_hold_above_95th_percentile(make_cohort):
    config = create_config(2010, 2010, min_scoring_users=0, allow_score_increases=True)
    baseline_items = make_cohort(2010, [round(6.0 + 0.1 * i, 1) for i in range(11)], start_id=1)
    later_items = make_cohort(2020, [round(5.0 + 0.1 * i, 1) for i in range(40)], start_id=100)
    by_id, ranked, _, baseline = _adjust(baseline_items + later_items, config)

    top = by_id[139]  # 39 of 40 below -> 97.5th percentile
    assert top.percentile_in_year == 97.5
    # Uncapped lookup would give 6.975; the p95 ceiling is 6.95
    assert top.adjusted_score == pytest.approx(baseline.cap_95)

    for item in ranked:
        if item.percentile_in_year >= 99:
            assert item.adjusted_score <= baseline.cap_100
        elif item.percentile_in_year >= 95:
            assert item.adjusted_score <= round(baseline.cap_95, 2)


def test_estimated_percentile_above_100_caps_at_maximum(scenario_config, make_cohort, make_item):
    config = scenario_config.with_overrides(allow_score_increases=True)
    items = make_cohort(2010, [7.0, 7.5, 8.0]) + [make_item(50, 11.5, 2030)]
    by_id, _, _, baseline = _adjust(items, config)

    # Estimator is unclamped: 85 + 3.0 / 1.5 * 15
    assert by_id[50].percentile_in_year == 115.0
    assert by_id[50].adjusted_score == baseline.cap_100


def test_policies_do_not_leak_between_runs(scenario_items, scenario_config):
    bidirectional = scenario_config.with_overrides(allow_score_increases=True)
    up, _, _, _ = _adjust(scenario_items, bidirectional)
    down, _, _, _ = _adjust(scenario_items, scenario_config)

    assert up[4].adjusted_score > up[4].mean
    assert down[4].adjusted_score == down[4].mean


def test_input_items_are_not_mutated(scenario_items, scenario_config):
    before = [item.to_dict() for item in scenario_items]
    _adjust(scenario_items, scenario_config)
    assert [item.to_dict() for item in scenario_items] == before
