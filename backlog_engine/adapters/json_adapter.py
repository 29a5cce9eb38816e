"""JSON adapter for the task wire shape."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from backlog_engine.schema import PRIORITIES, Task

_REQUIRED_FIELDS = {"id", "title"}


def format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _parse_timestamp(raw, field: str, index: int, required: bool = True) -> datetime | None:
    if raw in (None, ""):
        if required:
            raise ValueError(f"Item {index}: missing {field}")
        return None
    try:
        value = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: malformed {field}") from exc
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def to_wire(task: Task) -> dict:
    """Serialize a task into its camelCase wire mapping."""

    return {
        "id": task.id,
        "title": task.title,
        "category": task.category,
        "priority": task.priority,
        "dueDate": format_timestamp(task.due_date),
        "createdAt": format_timestamp(task.created_at),
        "completed": task.completed,
        "completedAt": format_timestamp(task.completed_at),
        "parentId": task.parent_id,
        "templateKey": task.template_key,
        "context": dict(task.context),
    }


def from_wire(item: dict, index: int = 1) -> Task:
    """Parse one wire mapping; a missing category is tolerated."""

    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    missing = sorted(field for field in _REQUIRED_FIELDS if not item.get(field))
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    priority = str(item.get("priority") or "medium").strip()
    if priority not in PRIORITIES:
        raise ValueError(f"Item {index}: invalid priority '{priority}'")

    context = item.get("context") or {}
    if not isinstance(context, dict):
        raise ValueError(f"Item {index}: context must be an object")

    completed = item.get("completed")
    if completed is None:
        completed = False
    if not isinstance(completed, bool):
        raise ValueError(f"Item {index}: completed must be true or false")

    category_raw = item.get("category")
    return Task(
        id=str(item["id"]).strip(),
        title=str(item["title"]),
        category=str(category_raw).strip() if category_raw else None,
        priority=priority,
        due_date=_parse_timestamp(item.get("dueDate"), "dueDate", index),
        created_at=_parse_timestamp(item.get("createdAt"), "createdAt", index),
        completed=completed,
        completed_at=_parse_timestamp(item.get("completedAt"), "completedAt", index, required=False),
        parent_id=item.get("parentId"),
        template_key=item.get("templateKey"),
        context=dict(context),
    )


def parse(file_path: str) -> list[Task]:
    """Parse a JSON file holding a list of wire tasks."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [from_wire(item, i) for i, item in enumerate(payload, start=1)]


def dump(tasks: list[Task], file_path: str) -> None:
    with open(file_path, "w", encoding="utf-8") as handle:
        json.dump([to_wire(task) for task in tasks], handle, indent=2, ensure_ascii=False)
