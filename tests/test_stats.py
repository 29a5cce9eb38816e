from datetime import date

from backlog_engine.stats import CompletionStats, category_breakdown, record_completion

from helpers import make_task


def test_record_completion_counts_and_streaks():
    task = make_task()
    stats = record_completion(CompletionStats(), task, 2, date(2026, 1, 5))
    assert stats.total_completed == 1
    assert stats.total_spawned == 2
    assert stats.completed_by_category == {"sales": 1}
    assert (stats.completed_today, stats.streak) == (1, 1)

    stats = record_completion(stats, make_task(category="hr"), 1, date(2026, 1, 5))
    assert (stats.completed_today, stats.streak) == (2, 1)

    stats = record_completion(stats, task, 3, date(2026, 1, 6))
    assert (stats.completed_today, stats.streak, stats.longest_streak) == (1, 2, 2)

    stats = record_completion(stats, task, 1, date(2026, 1, 9))
    assert (stats.streak, stats.longest_streak) == (1, 2)
    assert stats.total_spawned == 7
    assert stats.completed_by_category == {"sales": 3, "hr": 1}


def test_record_completion_does_not_mutate_input():
    before = CompletionStats()
    record_completion(before, make_task(), 1, date(2026, 1, 5))
    assert before.completed_by_category == {}


def test_category_breakdown_sorted_by_count():
    stats = CompletionStats(completed_by_category={"finance": 4, "hr": 1})
    rows = category_breakdown(stats)
    assert len(rows) == 8
    assert [row["id"] for row in rows[:2]] == ["finance", "hr"]
    assert rows[0]["label"] == "Finance"
