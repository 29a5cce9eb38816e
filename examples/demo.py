"""Demo script for the backlog engine."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from backlog_engine.engine import TaskEngine
from backlog_engine.log import configure_logging


def main() -> None:
    configure_logging("DEBUG")
    engine = TaskEngine.seeded(42)
    tasks = engine.generate_initial_tasks()
    print("Initial backlog:")
    for task in tasks:
        print(f"  [{task.category}/{task.priority}] {task.title}")

    completed = tasks[0]
    print(f"\nCompleting: {completed.title}")
    for task in engine.complete_task(completed):
        print(f"  -> [{task.category}/{task.priority}] {task.title} (template={task.template_key})")


if __name__ == "__main__":
    main()
