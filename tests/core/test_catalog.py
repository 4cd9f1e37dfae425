import pytest

from fixkit.core.catalog import OperationCatalog, order_key
from fixkit.core.errors import CatalogError, SelectionError
from fixkit.core.operations import Operation


class NamedOperation(Operation):
    def __init__(self, label: str):
        self.label = label

    def execute(self, context):
        return None


def build(*selectors):
    catalog = OperationCatalog()
    for selector in selectors:
        catalog.register(selector, f"op {selector}", NamedOperation(f"op {selector}"))
    return catalog


def test_order_key_numbers_before_letters():
    assert sorted(["b", "10", "A", "2", "1"], key=order_key) == ["1", "2", "10", "A", "b"]
    assert order_key("07") == order_key("7")


def test_ordered_entries_sorts_numerically_then_lexically():
    catalog = build("10", "L", "2", "h", "1", "9")
    assert [e.selector for e in catalog.ordered_entries()] == ["1", "2", "9", "10", "H", "L"]


def test_lookup_is_stable_and_case_insensitive():
    catalog = build("1", "H")
    catalog.close()
    first = catalog.lookup("h")
    assert first is catalog.lookup("H")
    assert first is catalog.lookup(" H ")
    assert catalog.lookup("1") is catalog.lookup("01")


def test_lookup_unknown_returns_none():
    catalog = build("1")
    assert catalog.lookup("2") is None
    assert catalog.lookup("") is None
    assert "2" not in catalog


def test_require_unknown_raises_selection_error():
    catalog = build("1")
    with pytest.raises(SelectionError) as excinfo:
        catalog.require("x")
    assert excinfo.value.selector == "x"


@pytest.mark.parametrize("first,second", [("3", "3"), ("h", "H"), ("2", "02")])
def test_selector_collision_is_rejected(first, second):
    catalog = build(first)
    with pytest.raises(CatalogError):
        catalog.register(second, "duplicate", NamedOperation("duplicate"))
    assert catalog.lookup(first).label == f"op {first}"


@pytest.mark.parametrize("selector", ["", "ab", "1a", "?", "q", "Q"])
def test_invalid_or_reserved_selector_is_rejected(selector):
    with pytest.raises(CatalogError):
        build(selector)


def test_closed_catalog_rejects_registration():
    catalog = build("1")
    catalog.close()
    assert catalog.closed
    with pytest.raises(CatalogError):
        catalog.register("2", "late", NamedOperation("late"))
    assert len(catalog) == 1
