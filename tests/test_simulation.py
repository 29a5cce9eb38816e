import pytest

from backlog_engine.engine import TaskEngine
from backlog_engine.randomness import NumpyRandomSource
from backlog_engine.simulation import simulate_backlog

from helpers import fixed_clock


def test_simulation_never_runs_dry():
    engine = TaskEngine(source=NumpyRandomSource(17), clock=fixed_clock)
    backlog = engine.generate_initial_tasks()
    start = len(backlog)

    report = simulate_backlog(engine, 100, backlog=backlog)

    assert report["steps"] == 100
    assert 1.0 <= report["avg_spawn_per_completion"] <= 3.0
    assert report["final_backlog_size"] == start - 100 + report["spawned_total"]
    assert report["final_backlog_size"] == len(backlog)
    assert report["template_linked_share"] == 1.0
    assert 0.0 < report["carried_context_share"] <= 1.0
    assert report["stats"]["total_completed"] == 100
    assert report["stats"]["last_active_date"] == "2026-01-05"


def test_simulation_rejects_negative_steps():
    with pytest.raises(ValueError):
        simulate_backlog(TaskEngine(source=NumpyRandomSource(1)), -1)
