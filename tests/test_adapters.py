import json

import pytest

from backlog_engine.adapters.json_adapter import dump, from_wire, parse, to_wire

from helpers import NOW, make_task


def test_to_wire_shape():
    payload = to_wire(make_task())
    assert list(payload) == [
        "id", "title", "category", "priority", "dueDate", "createdAt",
        "completed", "completedAt", "parentId", "templateKey", "context",
    ]
    assert payload["dueDate"] == "2026-01-05T09:00:00.000Z"
    assert payload["completedAt"] is None
    assert payload["context"] == {"company": "Acme Corp"}


def test_dump_then_parse(tmp_path):
    path = tmp_path / "backlog.json"
    task = make_task(completed=True, completed_at=NOW, parent_id="p0")
    dump([task], str(path))
    tasks = parse(str(path))
    assert len(tasks) == 1
    assert tasks[0] == task


def test_from_wire_tolerates_missing_category():
    task = from_wire({"id": "x", "title": "Orphan", "dueDate": "2026-01-06T00:00:00Z", "createdAt": "2026-01-05T00:00:00Z"})
    assert task.category is None
    assert task.priority == "medium"
    assert task.context == {}


@pytest.mark.parametrize(
    "item",
    [
        {"title": "No id", "dueDate": "2026-01-06T00:00:00Z", "createdAt": "2026-01-05T00:00:00Z"},
        {"id": "x", "title": "Bad date", "dueDate": "bad", "createdAt": "2026-01-05T00:00:00Z"},
        {"id": "x", "title": "Bad priority", "priority": "urgent", "dueDate": "2026-01-06T00:00:00Z", "createdAt": "2026-01-05T00:00:00Z"},
        {"id": "x", "title": "Bad context", "context": [], "dueDate": "2026-01-06T00:00:00Z", "createdAt": "2026-01-05T00:00:00Z"},
        {"id": "x", "title": "String flag", "completed": "false", "dueDate": "2026-01-06T00:00:00Z", "createdAt": "2026-01-05T00:00:00Z"},
        {"id": "x", "title": "Numeric flag", "completed": 1, "dueDate": "2026-01-06T00:00:00Z", "createdAt": "2026-01-05T00:00:00Z"},
    ],
)
def test_from_wire_malformed(item):
    with pytest.raises(ValueError):
        from_wire(item)


def test_parse_requires_list(tmp_path):
    path = tmp_path / "backlog.json"
    path.write_text(json.dumps({"id": "x"}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse(str(path))
