"""Placeholder value generation and self-healing title substitution."""

from __future__ import annotations

from typing import Callable, Mapping

from backlog_engine.catalog import PLACEHOLDER_RE
from backlog_engine.randomness import RandomSource, pick, rand_int
from backlog_engine.schema import ContextValue, WorkflowTemplate

# Integer placeholders: quarter, ticket/sprint number, batch size.
NUMERIC_RANGES: dict[str, tuple[int, int]] = {
    "q": (1, 4),
    "num": (100, 9999),
    "num2": (10, 200),
}

VALUE_POOLS: dict[str, tuple[str, ...]] = {
    "company": (
        "Acme Corp", "Globex Inc", "Initech", "Umbrella Co", "Stark Industries",
        "Wayne Enterprises", "Hooli", "Pied Piper", "Dunder Mifflin", "Prestige Worldwide",
        "Cyberdyne Systems", "Wonka Industries", "Massive Dynamic", "Soylent Corp",
    ),
    "channel": ("Google Ads", "LinkedIn", "Instagram", "TikTok", "Twitter/X", "YouTube", "Email", "Facebook"),
    "topic": (
        "AI in Business", "Remote Work Best Practices", "Growth Hacking", "Customer Retention",
        "Industry Trends 2026", "Data-Driven Decisions", "Sustainable Business", "Team Productivity",
    ),
    "variant": ("A", "B", "C", "D"),
    "product": ("Pro Plan", "Enterprise Suite", "Starter Pack", "API Platform", "Analytics Dashboard"),
    "process": ("invoicing", "onboarding", "deployment", "reporting", "approvals"),
    "vendor": ("AWS", "Salesforce", "HubSpot", "Slack", "Zoom", "Notion", "Figma"),
    "role": (
        "Software Engineer", "Product Manager", "Sales Rep", "Marketing Lead",
        "Data Analyst", "UX Designer", "DevOps Engineer", "Customer Success Manager",
    ),
    "month": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "feature": (
        "Dashboard", "Notifications", "Search", "Settings", "Reports",
        "Integrations", "Permissions", "Billing", "Onboarding", "Analytics",
    ),
    "module": ("auth", "payments", "notifications", "analytics", "user-management", "api-gateway"),
    "severity": ("critical", "high", "medium", "low"),
    "service": ("user-service", "payment-service", "notification-service", "analytics-service"),
    "env": ("staging", "production", "dev"),
}


class ContextGenerator:
    """Draws placeholder values from fixed ranges and value pools."""

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    def generate_value(self, key: str) -> ContextValue:
        if key in NUMERIC_RANGES:
            low, high = NUMERIC_RANGES[key]
            return rand_int(self._source, low, high)
        pool = VALUE_POOLS.get(key)
        if pool:
            return pick(self._source, pool)
        return key

    def build_context(self, template: WorkflowTemplate) -> dict[str, ContextValue]:
        return {key: self.generate_value(key) for key in template.context_keys}

    def resolve_title(self, pattern: str, context: Mapping[str, ContextValue]) -> str:
        return fill_template(pattern, context, self.generate_value)


def fill_template(
    pattern: str,
    context: Mapping[str, ContextValue],
    fallback: Callable[[str], ContextValue],
) -> str:
    """Substitute every ``{key}`` token, asking ``fallback`` for absent keys."""

    def _replace(match) -> str:
        key = match.group(1)
        if key in context:
            return str(context[key])
        return str(fallback(key))

    return PLACEHOLDER_RE.sub(_replace, pattern)
