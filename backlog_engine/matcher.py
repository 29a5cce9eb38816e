"""Keyword-overlap matching of generated titles back to catalog templates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from loguru import logger
from sklearn.feature_extraction.text import CountVectorizer

import backlog_engine.log  # noqa: F401
from backlog_engine.catalog import PLACEHOLDER_RE, TemplateCatalog
from backlog_engine.randomness import RandomSource, pick
from backlog_engine.schema import WorkflowTemplate

# Lowercase words longer than two characters.
TOKEN_PATTERN = r"(?u)\w{3,}"

_analyzer = CountVectorizer(token_pattern=TOKEN_PATTERN, lowercase=True).build_analyzer()


def strip_placeholders(pattern: str) -> str:
    return PLACEHOLDER_RE.sub(" ", pattern)


def tokenize(text: str) -> list[str]:
    """Split text into lowercase tokens of three or more word characters."""

    return _analyzer(text)


@dataclass
class _CategoryIndex:
    templates: tuple[WorkflowTemplate, ...]
    vectorizer: Optional[CountVectorizer]
    # Binary template x term matrix.
    terms: Optional[np.ndarray]


def _build_index(templates: tuple[WorkflowTemplate, ...]) -> _CategoryIndex:
    vectorizer = CountVectorizer(token_pattern=TOKEN_PATTERN, lowercase=True)
    try:
        matrix = vectorizer.fit_transform([strip_placeholders(t.pattern) for t in templates])
    except ValueError:
        # Every pattern is made of placeholders or short words.
        logger.debug("Empty vocabulary for templates {}", [t.key for t in templates])
        return _CategoryIndex(templates=templates, vectorizer=None, terms=None)
    terms = (matrix.toarray() > 0).astype(np.int64)
    return _CategoryIndex(templates=templates, vectorizer=vectorizer, terms=terms)


class TemplateMatcher:
    """Re-links follow-up titles to templates so task chains never end."""

    def __init__(self, catalog: TemplateCatalog, source: RandomSource, min_score: int = 2) -> None:
        self.catalog = catalog
        self.source = source
        self.min_score = min_score
        self._indexes: dict[str, _CategoryIndex] = {}

    def _index_for(self, category_id: str) -> _CategoryIndex:
        index = self._indexes.get(category_id)
        if index is None:
            index = _build_index(self.catalog.templates_for(category_id))
            self._indexes[category_id] = index
        return index

    def score_templates(self, title: str, category_id: Optional[str]) -> np.ndarray:
        """Count title tokens (with repeats) found in each template's token set."""

        templates = self.catalog.templates_for(category_id)
        if not templates:
            return np.zeros(0, dtype=np.int64)

        index = self._index_for(category_id)
        if index.vectorizer is None:
            return np.zeros(len(templates), dtype=np.int64)

        counts = index.vectorizer.transform([title]).toarray()[0]
        return index.terms @ counts

    def find_best_matching_template(self, title: str, category_id: Optional[str]) -> Optional[WorkflowTemplate]:
        """Highest-overlap template, or a random one when the overlap is weak.

        Ties keep the first template in catalog order. Returns ``None`` only
        when the category has no templates.
        """

        templates = self.catalog.templates_for(category_id)
        if not templates:
            return None

        scores = self.score_templates(title, category_id)
        best = int(np.argmax(scores))
        if scores[best] >= self.min_score:
            return templates[best]

        logger.debug("Weak match ({}) for {!r} in {}; picking random template", int(scores[best]), title, category_id)
        return pick(self.source, templates)
