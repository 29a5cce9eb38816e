"""Backlog simulation: keep completing tasks and measure what the chain spawns."""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict

import numpy as np

from backlog_engine.backlog import open_tasks, sort_tasks
from backlog_engine.engine import TaskEngine
from backlog_engine.schema import Task
from backlog_engine.stats import CompletionStats, record_completion


def _share(flags: list[bool]) -> float:
    return float(np.mean(flags)) if flags else 0.0


def simulate_backlog(engine: TaskEngine, steps: int, backlog: list[Task] | None = None) -> dict:
    """Complete the top-priority open task ``steps`` times and report on the spawns.

    A given ``backlog`` list is updated in place.
    """

    if steps < 0:
        raise ValueError("steps must be non-negative")

    tasks = backlog if backlog is not None else engine.generate_initial_tasks()
    stats = CompletionStats()
    spawn_counts: list[int] = []
    carried: list[bool] = []
    crossed: list[bool] = []
    linked: list[bool] = []

    for _ in range(steps):
        pending = open_tasks(tasks)
        if not pending:
            break
        task = sort_tasks(pending, by="priority")[0]
        spawned = engine.complete_task(task)
        tasks.remove(task)
        tasks[:0] = spawned

        spawn_counts.append(len(spawned))
        for child in spawned:
            carried.append(bool(task.context) and child.context == task.context)
            crossed.append(child.category != task.category)
            linked.append(child.template_key is not None)
        stats = record_completion(stats, task, len(spawned), engine.clock().date())

    summary = asdict(stats)
    if stats.last_active_date is not None:
        summary["last_active_date"] = stats.last_active_date.isoformat()

    return {
        "steps": len(spawn_counts),
        "spawned_total": int(sum(spawn_counts)),
        "avg_spawn_per_completion": float(np.mean(spawn_counts)) if spawn_counts else 0.0,
        "carried_context_share": _share(carried),
        "cross_category_share": _share(crossed),
        "template_linked_share": _share(linked),
        "final_backlog_size": len(tasks),
        "category_counts": dict(Counter(task.category for task in tasks)),
        "stats": summary,
    }
