"""Task creation from workflow templates."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Optional

from loguru import logger

import backlog_engine.log  # noqa: F401
from backlog_engine.catalog import TemplateCatalog
from backlog_engine.config import EngineConfig
from backlog_engine.context import ContextGenerator
from backlog_engine.randomness import RandomSource, chance, pick, rand_int, weighted_choice
from backlog_engine.schema import CATEGORIES, PRIORITIES, Task

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
_SECONDS_PER_DAY = 86400


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


class TaskFactory:
    """Builds fully formed tasks from the catalog and generated context."""

    def __init__(
        self,
        catalog: TemplateCatalog,
        source: RandomSource,
        clock: Callable[[], datetime],
        config: EngineConfig,
        context_generator: Optional[ContextGenerator] = None,
    ) -> None:
        self.catalog = catalog
        self.source = source
        self.clock = clock
        self.config = config
        self.context_generator = context_generator or ContextGenerator(source)

    def generate_id(self) -> str:
        """Millisecond timestamp in base 36 followed by a random 6-char suffix."""

        millis = int(self.clock().timestamp() * 1000)
        suffix = "".join(_BASE36[rand_int(self.source, 0, 35)] for _ in range(6))
        return _to_base36(millis) + suffix

    def due_date(self, now: datetime) -> datetime:
        low = self.config.min_due_days * _SECONDS_PER_DAY
        high = self.config.max_due_days * _SECONDS_PER_DAY - 1
        return now + timedelta(seconds=rand_int(self.source, low, high))

    def select_priority(self, override: Optional[str] = None, parent_priority: Optional[str] = None) -> str:
        if override:
            return override
        if parent_priority and chance(self.source, self.config.inherit_priority_chance):
            return parent_priority
        return weighted_choice(self.source, self.config.weights())

    def create_task(self, category_id: Optional[str] = None, parent_id: Optional[str] = None) -> Task:
        """Create a task from a random template of the given (or a random) category."""

        category = category_id or pick(self.source, CATEGORIES)
        templates = self.catalog.templates_for(category)
        if not templates:
            logger.debug("No templates for category {}; creating fallback task", category)
            return self.create_fallback_task(category, parent_id)

        template = pick(self.source, templates)
        context = self.context_generator.build_context(template)
        title = self.context_generator.resolve_title(template.pattern, context)
        return self._build(
            title=title,
            category=category,
            priority=self.select_priority(),
            parent_id=parent_id,
            template_key=template.key,
            context=context,
        )

    def create_fallback_task(self, category_id: Optional[str], parent_id: Optional[str] = None) -> Task:
        return self._build(
            title=f"Complete pending {category_id} task",
            category=category_id,
            priority=self.select_priority(),
            parent_id=parent_id,
            template_key=None,
            context={},
        )

    def create_custom_task(self, title: str, category: str, priority: str = "medium") -> Task:
        """Create a user-entered task with no workflow template."""

        title = title.strip() if title else ""
        if not title:
            raise ValueError("Custom task title must not be blank")
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category '{category}'")
        if priority not in PRIORITIES:
            raise ValueError(f"Unknown priority '{priority}'")

        now = self.clock()
        return Task(
            id=self.generate_id(),
            title=title,
            category=category,
            priority=priority,
            due_date=now + timedelta(days=self.config.custom_due_days),
            created_at=now,
        )

    def generate_initial_tasks(self) -> list[Task]:
        """One task per category plus a few random extras."""

        tasks = [self.create_task(category) for category in CATEGORIES]
        extra = rand_int(self.source, self.config.min_extra_initial, self.config.max_extra_initial)
        tasks.extend(self.create_task() for _ in range(extra))
        logger.debug("Generated initial backlog of {} tasks", len(tasks))
        return tasks

    def build_follow_up(
        self,
        title: str,
        category: str,
        priority: str,
        parent_id: Optional[str],
        template_key: Optional[str],
        context: dict,
    ) -> Task:
        return self._build(
            title=title,
            category=category,
            priority=priority,
            parent_id=parent_id,
            template_key=template_key,
            context=dict(context),
        )

    def _build(self, title, category, priority, parent_id, template_key, context) -> Task:
        now = self.clock()
        return Task(
            id=self.generate_id(),
            title=title,
            category=category,
            priority=priority,
            due_date=self.due_date(now),
            created_at=now,
            parent_id=parent_id,
            template_key=template_key,
            context=context,
        )
