from datetime import datetime, timezone

from backlog_engine.catalog import TemplateCatalog
from backlog_engine.schema import Task

NOW = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)


def fixed_clock():
    return NOW


class ScriptedSource:
    """Returns scripted draws in order, then ``default`` forever."""

    def __init__(self, values=(), default=0.0):
        self._values = list(values)
        self.default = default

    def next(self):
        if self._values:
            return self._values.pop(0)
        return self.default


def deal_catalog():
    return TemplateCatalog.from_mapping(
        {
            "sales": [
                {
                    "key": "deal",
                    "pattern": "Close deal with {company}",
                    "context_keys": ["company"],
                    "follow_ups": [
                        ("Send contract to {company}", "sales"),
                        ("Invoice {company} for the deal", "finance"),
                    ],
                }
            ],
            "finance": [
                {
                    "key": "invoice",
                    "pattern": "Send invoice to {company}",
                    "context_keys": ["company"],
                    "follow_ups": [("Chase payment from {company}", "finance", "critical")],
                }
            ],
        }
    )


def make_task(**overrides):
    values = {
        "id": "parent1",
        "title": "Prepare proposal for Acme Corp",
        "category": "sales",
        "priority": "medium",
        "due_date": NOW,
        "created_at": NOW,
        "template_key": "sales_proposal",
        "context": {"company": "Acme Corp"},
    }
    values.update(overrides)
    return Task(**values)
