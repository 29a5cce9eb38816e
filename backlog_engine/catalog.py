"""Read-only workflow template catalog."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any, Optional

from backlog_engine.catalog_data import RAW_CATALOG
from backlog_engine.schema import CATEGORIES, PRIORITIES, FollowUpDefinition, WorkflowTemplate

PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


class CatalogError(ValueError):
    """Raised when static catalog data is malformed."""


def placeholders(pattern: str) -> list[str]:
    """Return the placeholder keys of a title pattern, in order of appearance."""

    return PLACEHOLDER_RE.findall(pattern)


def _check_pattern(pattern: Any, where: str) -> str:
    if not isinstance(pattern, str) or not pattern.strip():
        raise CatalogError(f"{where}: pattern must be a non-empty string")
    stripped = PLACEHOLDER_RE.sub("", pattern)
    if "{" in stripped or "}" in stripped:
        raise CatalogError(f"{where}: malformed placeholder in {pattern!r}")
    return pattern


def _parse_follow_up(raw: Any, where: str, context_keys: tuple[str, ...]) -> FollowUpDefinition:
    if not isinstance(raw, (tuple, list)) or len(raw) not in (2, 3):
        raise CatalogError(f"{where}: follow-up must be (pattern, category[, priority])")

    pattern = _check_pattern(raw[0], where)
    category = raw[1]
    priority = raw[2] if len(raw) == 3 else None

    if category not in CATEGORIES:
        raise CatalogError(f"{where}: unknown follow-up category {category!r}")
    if priority is not None and priority not in PRIORITIES:
        raise CatalogError(f"{where}: unknown priority override {priority!r}")

    undeclared = [key for key in placeholders(pattern) if key not in context_keys]
    if undeclared:
        raise CatalogError(f"{where}: follow-up uses undeclared context keys {undeclared}")

    return FollowUpDefinition(pattern=pattern, category=category, priority=priority)


def _parse_template(raw: Any, category: str, index: int) -> WorkflowTemplate:
    where = f"{category}[{index}]"
    if not isinstance(raw, Mapping):
        raise CatalogError(f"{where}: template must be a mapping")

    key = raw.get("key")
    if not isinstance(key, str) or not key:
        raise CatalogError(f"{where}: missing template key")
    where = f"{category}/{key}"

    pattern = _check_pattern(raw.get("pattern"), where)
    context_keys = tuple(raw.get("context_keys", ()))

    undeclared = [name for name in placeholders(pattern) if name not in context_keys]
    if undeclared:
        raise CatalogError(f"{where}: pattern uses undeclared context keys {undeclared}")

    follow_ups = tuple(
        _parse_follow_up(item, f"{where}.follow_ups[{i}]", context_keys)
        for i, item in enumerate(raw.get("follow_ups", ()))
    )
    return WorkflowTemplate(
        key=key,
        category=category,
        pattern=pattern,
        context_keys=context_keys,
        follow_ups=follow_ups,
    )


class TemplateCatalog:
    """Immutable category -> workflow templates table.

    Build it once with :meth:`from_mapping` (or :func:`default_catalog`) and
    inject it into engines; lookups never raise.
    """

    def __init__(self, templates: Mapping[str, tuple[WorkflowTemplate, ...]]) -> None:
        self._templates = {category: tuple(items) for category, items in templates.items()}

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "TemplateCatalog":
        """Validate raw catalog data and build a catalog, failing fast."""

        parsed: dict[str, tuple[WorkflowTemplate, ...]] = {}
        seen_keys: set[str] = set()
        for category, items in raw.items():
            if category not in CATEGORIES:
                raise CatalogError(f"Unknown catalog category {category!r}")

            templates = tuple(_parse_template(item, category, i) for i, item in enumerate(items))
            for template in templates:
                if template.key in seen_keys:
                    raise CatalogError(f"Duplicate template key {template.key!r}")
                seen_keys.add(template.key)
            parsed[category] = templates

        return cls(parsed)

    def templates_for(self, category_id: Optional[str]) -> tuple[WorkflowTemplate, ...]:
        return self._templates.get(category_id, ())

    def find_template(self, key: Optional[str], category_hint: Optional[str] = None) -> Optional[WorkflowTemplate]:
        """Find a template by key, searching the hinted category first."""

        if not key:
            return None

        for template in self.templates_for(category_hint):
            if template.key == key:
                return template

        for template in self:
            if template.key == key:
                return template
        return None

    def categories(self) -> list[str]:
        return list(self._templates)

    def __iter__(self) -> Iterator[WorkflowTemplate]:
        for templates in self._templates.values():
            yield from templates

    def __len__(self) -> int:
        return sum(len(templates) for templates in self._templates.values())


def default_catalog() -> TemplateCatalog:
    """Build the shipped business workflow catalog."""

    return TemplateCatalog.from_mapping(RAW_CATALOG)
