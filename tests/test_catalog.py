import pytest

from backlog_engine.catalog import CatalogError, TemplateCatalog, default_catalog, placeholders
from backlog_engine.schema import CATEGORIES


def _raw(**template):
    base = {"key": "t1", "pattern": "Review {company} deal", "context_keys": ["company"], "follow_ups": []}
    base.update(template)
    return {"sales": [base]}


def test_every_category_has_templates():
    catalog = default_catalog()
    for category in CATEGORIES:
        assert len(catalog.templates_for(category)) > 0


def test_default_catalog_keys_are_unique():
    catalog = default_catalog()
    keys = [template.key for template in catalog]
    assert len(keys) == len(set(keys)) == len(catalog)


def test_templates_for_unknown_category_is_empty():
    catalog = default_catalog()
    assert catalog.templates_for("legal") == ()
    assert catalog.templates_for(None) == ()


def test_find_template_uses_hint_then_full_scan():
    catalog = default_catalog()
    assert catalog.find_template("sales_proposal", "sales").category == "sales"
    assert catalog.find_template("sales_proposal", "finance").key == "sales_proposal"
    assert catalog.find_template("sales_proposal", None).key == "sales_proposal"
    assert catalog.find_template("missing", "sales") is None
    assert catalog.find_template(None, "sales") is None


def test_placeholders_in_order():
    assert placeholders("Fix bug #{num} in {module} module") == ["num", "module"]


def test_cross_category_bridge_present():
    template = default_catalog().find_template("sales_negotiate", "sales")
    targets = {follow_up.category for follow_up in template.follow_ups}
    assert {"operations", "finance", "support", "product"} <= targets
    overrides = [f.priority for f in template.follow_ups if f.priority]
    assert overrides == ["high"]


def test_duplicate_key_rejected():
    raw = _raw()
    raw["finance"] = [{"key": "t1", "pattern": "Close books", "context_keys": []}]
    with pytest.raises(CatalogError):
        TemplateCatalog.from_mapping(raw)


@pytest.mark.parametrize(
    "template",
    [
        {"pattern": ""},
        {"pattern": "Review {company deal"},
        {"context_keys": []},
        {"follow_ups": [("Call {vendor}", "sales")]},
        {"follow_ups": [("Call {company}", "legal")]},
        {"follow_ups": [("Call {company}", "sales", "urgent")]},
        {"follow_ups": [("Call {company}",)]},
    ],
)
def test_malformed_templates_fail_at_load(template):
    with pytest.raises(CatalogError):
        TemplateCatalog.from_mapping(_raw(**template))


def test_unknown_catalog_category_rejected():
    with pytest.raises(ValueError):
        TemplateCatalog.from_mapping({"legal": []})
