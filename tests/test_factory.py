from datetime import timedelta

import pytest

from backlog_engine.catalog import default_catalog
from backlog_engine.config import EngineConfig
from backlog_engine.factory import TaskFactory
from backlog_engine.randomness import NumpyRandomSource
from backlog_engine.schema import CATEGORIES

from helpers import NOW, ScriptedSource, fixed_clock


def make_factory(source=None):
    return TaskFactory(default_catalog(), source or NumpyRandomSource(11), fixed_clock, EngineConfig())


def test_initial_tasks_cover_every_category():
    for seed in range(10):
        tasks = make_factory(NumpyRandomSource(seed)).generate_initial_tasks()
        assert 8 <= len(tasks) <= 12
        assert {task.category for task in tasks} == set(CATEGORIES)
        assert all(task.parent_id is None and task.template_key for task in tasks)


def test_create_task_resolves_title_and_context():
    factory = make_factory()
    catalog = factory.catalog
    for _ in range(50):
        task = factory.create_task("engineering")
        template = catalog.find_template(task.template_key, "engineering")
        assert task.category == "engineering"
        assert set(template.context_keys) <= set(task.context)
        assert "{" not in task.title
        assert not task.completed and task.completed_at is None


def test_create_task_without_category_picks_known_one():
    task = make_factory().create_task()
    assert task.category in CATEGORIES


def test_unknown_category_yields_fallback_task():
    task = make_factory().create_task("legal", parent_id="p1")
    assert task.title == "Complete pending legal task"
    assert task.template_key is None
    assert task.context == {}
    assert task.parent_id == "p1"


def test_due_dates_inside_window():
    factory = make_factory()
    for _ in range(100):
        task = factory.create_task()
        assert task.created_at == NOW
        assert NOW < task.due_date < NOW + timedelta(days=14)
        assert task.due_date >= NOW + timedelta(days=1)


def test_due_date_window_edges():
    low = make_factory(ScriptedSource(default=0.0)).due_date(NOW)
    high = make_factory(ScriptedSource(default=0.9999999999)).due_date(NOW)
    assert low == NOW + timedelta(days=1)
    assert NOW + timedelta(days=13) < high < NOW + timedelta(days=14)


def test_priority_override_and_weights():
    factory = make_factory(ScriptedSource(default=0.05))
    assert factory.select_priority("low", "critical") == "low"
    assert factory.select_priority(None, "high") == "high"
    assert make_factory(ScriptedSource([0.5, 0.05])).select_priority(None, "high") == "critical"
    assert make_factory(ScriptedSource([0.2])).select_priority() == "high"
    assert make_factory(ScriptedSource([0.6])).select_priority() == "medium"
    assert make_factory(ScriptedSource([0.8])).select_priority() == "low"


def test_generate_id_shape_and_uniqueness():
    factory = make_factory()
    ids = {factory.generate_id() for _ in range(500)}
    assert len(ids) == 500
    sample = next(iter(ids))
    assert sample.isalnum() and sample == sample.lower()
    assert sample[:-6] == next(iter(ids))[:-6]


def test_custom_task():
    task = make_factory().create_custom_task("  Call the bank  ", "finance", "high")
    assert task.title == "Call the bank"
    assert task.template_key is None and task.context == {}
    assert task.due_date == NOW + timedelta(days=7)
    with pytest.raises(ValueError):
        make_factory().create_custom_task("   ", "finance")
    with pytest.raises(ValueError):
        make_factory().create_custom_task("Call", "finance", "urgent")
    with pytest.raises(ValueError):
        make_factory().create_custom_task("Call", "legal")


def test_due_date_stays_below_upper_bound_with_narrow_window():
    config = EngineConfig(min_due_days=1, max_due_days=2)
    factory = TaskFactory(default_catalog(), ScriptedSource(default=0.9999999999), fixed_clock, config)
    due = factory.due_date(NOW)
    assert NOW + timedelta(days=1) < due < NOW + timedelta(days=2)
