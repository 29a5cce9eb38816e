from backlog_engine.context import VALUE_POOLS, ContextGenerator, fill_template
from backlog_engine.randomness import NumpyRandomSource
from backlog_engine.schema import WorkflowTemplate

from helpers import ScriptedSource


def test_numeric_keys_stay_in_range():
    generator = ContextGenerator(NumpyRandomSource(7))
    for _ in range(200):
        assert 1 <= generator.generate_value("q") <= 4
        assert 100 <= generator.generate_value("num") <= 9999
        assert 10 <= generator.generate_value("num2") <= 200


def test_numeric_range_edges():
    assert ContextGenerator(ScriptedSource(default=0.0)).generate_value("q") == 1
    assert ContextGenerator(ScriptedSource(default=0.999999)).generate_value("q") == 4


def test_pooled_keys_draw_from_pool():
    generator = ContextGenerator(NumpyRandomSource(3))
    for key, pool in VALUE_POOLS.items():
        assert generator.generate_value(key) in pool


def test_unknown_key_returns_key_name():
    assert ContextGenerator(NumpyRandomSource(1)).generate_value("galaxy") == "galaxy"


def test_build_context_covers_declared_keys():
    template = WorkflowTemplate(key="k", category="engineering", pattern="Fix bug #{num} in {module}", context_keys=("num", "module"))
    context = ContextGenerator(NumpyRandomSource(5)).build_context(template)
    assert set(context) == {"num", "module"}


def test_fill_template_uses_fallback_only_for_missing_keys():
    requested = []

    def fallback(key):
        requested.append(key)
        return f"<{key}>"

    title = fill_template("Sync {company} with {vendor} in Q{q}", {"company": "Hooli", "q": 3}, fallback)
    assert title == "Sync Hooli with <vendor> in Q3"
    assert requested == ["vendor"]


def test_resolve_title_self_heals_missing_context():
    generator = ContextGenerator(ScriptedSource(default=0.0))
    assert generator.resolve_title("Call {company}", {}) == "Call Acme Corp"
