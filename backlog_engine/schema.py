"""Core data schema for tasks, categories and workflow templates."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union


ContextValue = Union[str, int]


class Category(str, Enum):
    """Closed set of business categories, in canonical display order."""

    MARKETING = "marketing"
    SALES = "sales"
    OPERATIONS = "operations"
    HR = "hr"
    FINANCE = "finance"
    PRODUCT = "product"
    ENGINEERING = "engineering"
    SUPPORT = "support"


class Priority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class CategoryMeta:
    """Presentation metadata; carried for renderers, never interpreted."""

    id: str
    label: str
    color: str
    icon: str


@dataclass(frozen=True)
class PriorityMeta:
    id: str
    label: str
    weight: int


CATEGORY_META: dict[Category, CategoryMeta] = {
    Category.MARKETING: CategoryMeta("marketing", "Marketing", "#6366f1", "\U0001F4E3"),
    Category.SALES: CategoryMeta("sales", "Sales", "#f59e0b", "\U0001F4B0"),
    Category.OPERATIONS: CategoryMeta("operations", "Operations", "#10b981", "⚙️"),
    Category.HR: CategoryMeta("hr", "HR", "#ec4899", "\U0001F465"),
    Category.FINANCE: CategoryMeta("finance", "Finance", "#14b8a6", "\U0001F4CA"),
    Category.PRODUCT: CategoryMeta("product", "Product", "#8b5cf6", "\U0001F680"),
    Category.ENGINEERING: CategoryMeta("engineering", "Engineering", "#3b82f6", "\U0001F527"),
    Category.SUPPORT: CategoryMeta("support", "Support", "#f97316", "\U0001F3A7"),
}

PRIORITY_META: dict[Priority, PriorityMeta] = {
    Priority.CRITICAL: PriorityMeta("critical", "Critical", 4),
    Priority.HIGH: PriorityMeta("high", "High", 3),
    Priority.MEDIUM: PriorityMeta("medium", "Medium", 2),
    Priority.LOW: PriorityMeta("low", "Low", 1),
}

CATEGORIES: list[str] = [category.value for category in Category]
PRIORITIES: list[str] = [priority.value for priority in Priority]


def priority_weight(priority: Optional[str]) -> int:
    """Return the presentation weight of a priority id, 0 when unknown."""

    try:
        return PRIORITY_META[Priority(priority)].weight
    except ValueError:
        return 0


@dataclass(frozen=True)
class FollowUpDefinition:
    """A follow-up title pattern bound to its target category."""

    pattern: str
    category: str
    priority: Optional[str] = None


@dataclass(frozen=True)
class WorkflowTemplate:
    """Catalog entry pairing a title pattern with its follow-up definitions."""

    key: str
    category: str
    pattern: str
    context_keys: tuple[str, ...] = ()
    follow_ups: tuple[FollowUpDefinition, ...] = ()


@dataclass
class Task:
    """A generated backlog task.

    Only ``completed`` and ``completed_at`` change after creation. ``parent_id``
    is a lineage back-reference; ``template_key`` and ``context`` are what let a
    completed task spawn related follow-ups.
    """

    id: str
    title: str
    category: Optional[str]
    priority: str
    due_date: datetime
    created_at: datetime
    completed: bool = False
    completed_at: Optional[datetime] = None
    parent_id: Optional[str] = None
    template_key: Optional[str] = None
    context: dict[str, ContextValue] = field(default_factory=dict)
