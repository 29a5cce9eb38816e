"""Engine facade wiring catalog, randomness, clock and config together."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from loguru import logger

import backlog_engine.log  # noqa: F401
from backlog_engine.catalog import TemplateCatalog, default_catalog
from backlog_engine.config import EngineConfig
from backlog_engine.context import ContextGenerator
from backlog_engine.factory import TaskFactory
from backlog_engine.matcher import TemplateMatcher
from backlog_engine.randomness import NumpyRandomSource, RandomSource
from backlog_engine.schema import Task
from backlog_engine.spawner import FollowUpSpawner


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskEngine:
    """Never-ending business task generator.

    Every collaborator is injected so separate engines never share state; by
    default an engine uses the shipped catalog, an OS-seeded numpy generator
    and the UTC wall clock.
    """

    def __init__(
        self,
        catalog: Optional[TemplateCatalog] = None,
        source: Optional[RandomSource] = None,
        clock: Optional[Callable[[], datetime]] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()
        self.source = source if source is not None else NumpyRandomSource()
        self.clock = clock or utc_now
        self.config = config or EngineConfig()

        self.context_generator = ContextGenerator(self.source)
        self.factory = TaskFactory(self.catalog, self.source, self.clock, self.config, self.context_generator)
        self.matcher = TemplateMatcher(self.catalog, self.source, min_score=self.config.min_match_score)
        self.spawner = FollowUpSpawner(self.factory, self.matcher, self.config)

    @classmethod
    def seeded(cls, seed: int, **kwargs) -> "TaskEngine":
        return cls(source=NumpyRandomSource(seed), **kwargs)

    def generate_initial_tasks(self) -> list[Task]:
        return self.factory.generate_initial_tasks()

    def create_task(self, category_id: Optional[str] = None, parent_id: Optional[str] = None) -> Task:
        return self.factory.create_task(category_id, parent_id)

    def create_custom_task(self, title: str, category: str, priority: str = "medium") -> Task:
        return self.factory.create_custom_task(title, category, priority)

    def spawn_follow_ups(self, completed_task: Task) -> list[Task]:
        return self.spawner.spawn_follow_ups(completed_task)

    def generate_id(self) -> str:
        return self.factory.generate_id()

    def complete_task(self, task: Task) -> list[Task]:
        """Mark ``task`` completed and return its freshly spawned follow-ups."""

        if task.completed:
            logger.warning("Task {} is already completed; nothing spawned", task.id)
            return []

        task.completed = True
        task.completed_at = self.clock()
        return self.spawn_follow_ups(task)
