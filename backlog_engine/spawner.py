"""Tiered follow-up spawning for completed tasks."""

from __future__ import annotations

from typing import Optional

from loguru import logger

import backlog_engine.log  # noqa: F401
from backlog_engine.config import EngineConfig
from backlog_engine.factory import TaskFactory
from backlog_engine.matcher import TemplateMatcher
from backlog_engine.randomness import chance, pick, rand_int
from backlog_engine.schema import FollowUpDefinition, Task, WorkflowTemplate

TIER_CONTINUATION = 1
TIER_BRIDGE = 2
TIER_FRESH = 3


class FollowUpSpawner:
    """Turns a completed task into one to three new tasks.

    Each slot draws ``r``: below ``tier1_threshold`` continues the same
    workflow, below ``tier2_threshold`` hands off to another category, and
    anything else creates a fresh task. An exhausted tier falls through to
    the next one. Continuation and bridge tasks carry the parent's context.
    """

    def __init__(self, factory: TaskFactory, matcher: TemplateMatcher, config: EngineConfig) -> None:
        self.factory = factory
        self.matcher = matcher
        self.config = config

    @property
    def source(self):
        return self.factory.source

    def spawn_follow_ups(self, completed_task: Task) -> list[Task]:
        count = rand_int(self.source, self.config.min_spawn, self.config.max_spawn)
        template = self.factory.catalog.find_template(completed_task.template_key, completed_task.category)
        if template is not None and not template.follow_ups:
            template = None

        used_titles: set[str] = set()
        spawned = []
        for _ in range(count):
            task, tier = self._spawn_one(completed_task, template, used_titles)
            logger.debug("Spawned tier {} task {!r} from {}", tier, task.title, completed_task.id)
            spawned.append(task)
        return spawned

    def _spawn_one(
        self,
        completed_task: Task,
        template: Optional[WorkflowTemplate],
        used_titles: set[str],
    ) -> tuple[Task, int]:
        roll = self.source.next()

        if template is not None and roll < self.config.tier1_threshold:
            follow_up = self._pick_continuation(template, completed_task.category, used_titles)
            if follow_up is not None:
                return self._build_follow_up(follow_up, completed_task), TIER_CONTINUATION

        if template is not None and roll < self.config.tier2_threshold:
            follow_up = self._pick_bridge(template, completed_task.category, used_titles)
            if follow_up is not None:
                return self._build_follow_up(follow_up, completed_task), TIER_BRIDGE

        return self._spawn_fresh(completed_task), TIER_FRESH

    def _pick_continuation(
        self, template: WorkflowTemplate, category: Optional[str], used_titles: set[str]
    ) -> Optional[FollowUpDefinition]:
        available = [f for f in template.follow_ups if f.pattern not in used_titles]
        if not available:
            return None
        same_category = [f for f in available if f.category == category]
        follow_up = pick(self.source, same_category or available)
        used_titles.add(follow_up.pattern)
        return follow_up

    def _pick_bridge(
        self, template: WorkflowTemplate, category: Optional[str], used_titles: set[str]
    ) -> Optional[FollowUpDefinition]:
        cross = [f for f in template.follow_ups if f.category != category and f.pattern not in used_titles]
        if not cross:
            return None
        follow_up = pick(self.source, cross)
        used_titles.add(follow_up.pattern)
        return follow_up

    def _build_follow_up(self, follow_up: FollowUpDefinition, parent: Task) -> Task:
        context = parent.context or {}
        title = self.factory.context_generator.resolve_title(follow_up.pattern, context)
        priority = self.factory.select_priority(follow_up.priority, parent.priority)
        next_template = self.matcher.find_best_matching_template(title, follow_up.category)
        return self.factory.build_follow_up(
            title=title,
            category=follow_up.category,
            priority=priority,
            parent_id=parent.id,
            template_key=next_template.key if next_template else None,
            context=context,
        )

    def _spawn_fresh(self, parent: Task) -> Task:
        same_category = chance(self.source, self.config.same_category_bias)
        category = parent.category if same_category else None
        return self.factory.create_task(category, parent.id)
