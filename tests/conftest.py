import pytest
import numpy as np

from score_adjuster.config import create_config
from score_adjuster.models import ScoredItem


def _build_item(item_id, mean, year, users=20000, rank=None, title=None):
    return ScoredItem(
        id=item_id,
        title=title or f"Title {item_id}",
        mean=mean,
        rank=rank or item_id,
        start_year=year,
        num_scoring_users=users,
    )


def _build_cohort(year, scores, start_id=1, users=20000):
    return [_build_item(start_id + i, score, year, users=users) for i, score in enumerate(scores)]


@pytest.fixture
def make_item():
    return _build_item


@pytest.fixture
def make_cohort():
    return _build_cohort


@pytest.fixture
def scenario_items():
    """Baseline year 2010 with three items, 2015 with five"""
    baseline = _build_cohort(2010, [7.0, 7.5, 8.0], start_id=1)
    later = _build_cohort(2015, [6.0, 6.5, 7.0, 8.0, 8.5], start_id=4)
    return baseline + later


@pytest.fixture
def scenario_config():
    return create_config(2010, 2010, min_scoring_users=0, min_cohort_size=3)


@pytest.fixture
def random_items():
    """300 items spread over 2005-2020 with a few unknown years"""
    rng = np.random.default_rng(42)
    items = []
    for i in range(300):
        year = int(rng.integers(2005, 2021)) if i % 25 else None
        mean = round(float(rng.uniform(5.5, 9.2)), 2)
        users = int(rng.integers(5000, 500000))
        items.append(_build_item(i + 1, mean, year, users=users))
    return items
