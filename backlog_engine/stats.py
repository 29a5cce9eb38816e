"""Completion statistics: totals, per-category counts and daily streaks."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Optional

from backlog_engine.schema import CATEGORY_META, Task


@dataclass(frozen=True)
class CompletionStats:
    total_completed: int = 0
    total_spawned: int = 0
    completed_by_category: dict[str, int] = field(default_factory=dict)
    completed_today: int = 0
    last_active_date: Optional[date] = None
    streak: int = 0
    longest_streak: int = 0


def record_completion(stats: CompletionStats, task: Task, spawned_count: int, today: date) -> CompletionStats:
    """Return stats updated for one completed task.

    Completing on consecutive days extends the streak; a gap resets it to 1.
    """

    by_category = dict(stats.completed_by_category)
    category = task.category or "unknown"
    by_category[category] = by_category.get(category, 0) + 1

    if stats.last_active_date == today:
        completed_today = stats.completed_today + 1
        streak = stats.streak
    else:
        completed_today = 1
        streak = stats.streak + 1 if stats.last_active_date == today - timedelta(days=1) else 1

    return replace(
        stats,
        total_completed=stats.total_completed + 1,
        total_spawned=stats.total_spawned + spawned_count,
        completed_by_category=by_category,
        completed_today=completed_today,
        last_active_date=today,
        streak=streak,
        longest_streak=max(stats.longest_streak, streak),
    )


def category_breakdown(stats: CompletionStats) -> list[dict]:
    rows = [
        {"id": meta.id, "label": meta.label, "icon": meta.icon, "count": stats.completed_by_category.get(meta.id, 0)}
        for meta in CATEGORY_META.values()
    ]
    return sorted(rows, key=lambda row: row["count"], reverse=True)
