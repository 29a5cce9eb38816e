"""Streamlit demo UI for the never-ending backlog."""

from __future__ import annotations

import json
from typing import Any

from backlog_engine.adapters import json_adapter
from backlog_engine.backlog import SORT_KEYS, filter_tasks, sort_tasks
from backlog_engine.engine import TaskEngine
from backlog_engine.schema import CATEGORIES, CATEGORY_META, PRIORITIES, Category, Task
from backlog_engine.stats import CompletionStats, category_breakdown, record_completion


def new_session(seed: int | None) -> dict[str, Any]:
    """Fresh engine, initial backlog and empty stats."""

    engine = TaskEngine.seeded(seed) if seed is not None else TaskEngine()
    return {
        "engine": engine,
        "tasks": engine.generate_initial_tasks(),
        "stats": CompletionStats(),
        "last_spawned": [],
    }


def complete_in_session(session: dict[str, Any], task_id: str) -> list[Task]:
    """Complete a task, put its follow-ups at the top and update stats."""

    engine: TaskEngine = session["engine"]
    tasks: list[Task] = session["tasks"]
    task = next((item for item in tasks if item.id == task_id), None)
    if task is None:
        return []

    spawned = engine.complete_task(task)
    tasks.remove(task)
    tasks[:0] = spawned
    session["stats"] = record_completion(session["stats"], task, len(spawned), engine.clock().date())
    session["last_spawned"] = [item.id for item in spawned]
    return spawned


def _category_label(category: str | None) -> str:
    try:
        meta = CATEGORY_META[Category(category)]
    except ValueError:
        return str(category)
    return f"{meta.icon} {meta.label}"


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Backlog Engine Demo", layout="wide")
    st.title("Backlog Engine — Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        seed_text = st.text_input("Seed (blank for random)", value="")
        if st.button("New backlog", type="primary") or "backlog" not in st.session_state:
            try:
                seed = int(seed_text) if seed_text.strip() else None
            except ValueError:
                st.error("Seed must be an integer.")
                return
            st.session_state["backlog"] = new_session(seed)

        sort_by = st.selectbox("Sort by", options=list(SORT_KEYS), index=0)
        category = st.selectbox("Category", options=["all", *CATEGORIES], index=0)

        st.subheader("Add task")
        custom_title = st.text_input("Title")
        custom_category = st.selectbox("Task category", options=CATEGORIES)
        custom_priority = st.selectbox("Priority", options=PRIORITIES, index=2)
        add = st.button("Add")

    session = st.session_state["backlog"]
    engine: TaskEngine = session["engine"]

    if add:
        try:
            session["tasks"].insert(0, engine.create_custom_task(custom_title, custom_category, custom_priority))
        except ValueError as exc:
            st.error(f"Input error: {exc}")

    stats: CompletionStats = session["stats"]
    s1, s2, s3, s4 = st.columns(4)
    s1.metric("Completed", stats.total_completed)
    s2.metric("Spawned", stats.total_spawned)
    s3.metric("Today", stats.completed_today)
    s4.metric("Streak", stats.streak)

    st.subheader("Backlog")
    visible = sort_tasks(filter_tasks(session["tasks"], category), by=sort_by)
    if not visible:
        st.info("No tasks in this view.")
    for task in visible:
        c1, c2, c3, c4 = st.columns([6, 2, 2, 1])
        marker = "✨ " if task.id in session["last_spawned"] else ""
        c1.write(f"{marker}**{task.title}**")
        c2.write(_category_label(task.category))
        c3.write(f"{task.priority} · due {task.due_date:%Y-%m-%d}")
        if c4.button("Done", key=f"done-{task.id}"):
            spawned = complete_in_session(session, task.id)
            st.toast(f"+{len(spawned)} new task{'s' if len(spawned) != 1 else ''} spawned!")
            st.rerun()

    st.subheader("By category")
    st.table(category_breakdown(stats))

    st.download_button(
        "Export backlog JSON",
        data=json.dumps([json_adapter.to_wire(task) for task in session["tasks"]], indent=2, ensure_ascii=False),
        file_name="backlog.json",
    )


if __name__ == "__main__":
    main()
