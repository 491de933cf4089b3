"""Tests for catalog loading and validation."""

import json

import pytest

from stockpile.catalog import (
    Catalog,
    effective_catalog,
    load_catalog,
    validate_catalog_data,
)
from stockpile.constants import STANDARD_CATEGORIES
from stockpile.models import HouseholdConfig, RecommendedItemDefinition


def _doc(*items, meta=None):
    return {
        "meta": meta if meta is not None else {"name": "Test kit", "version": "1.0.0"},
        "items": list(items),
    }


def _entry(**overrides):
    entry = {
        "id": "flashlight",
        "names": {"en": "Flashlight", "fi": "Taskulamppu"},
        "category": "light-power",
        "baseQuantity": 1,
        "unit": "pieces",
        "scaleWithPeople": True,
    }
    entry.update(overrides)
    return entry


def test_builtin_catalog_loads():
    """The packaged catalog is valid and covers every standard category."""
    catalog = load_catalog()
    assert isinstance(catalog, Catalog)
    assert len(catalog.items) > 20
    assert {item.category for item in catalog.items} == set(STANDARD_CATEGORIES)

    water = next(item for item in catalog.items if item.id == "bottled-water")
    assert water.unit == "liters"
    assert water.scale_with_people and water.scale_with_days
    assert water.i18n_key == "products.bottled-water"


def test_builtin_catalog_messages():
    messages = load_catalog().messages()
    assert messages["products.bottled-water"] == "Bottled water"


def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(_doc(_entry(caloriesPer100g=0))), encoding="utf-8")

    catalog = load_catalog(path)
    assert [item.id for item in catalog.items] == ["flashlight"]
    assert catalog.items[0].scale_with_people is True
    assert catalog.items[0].calories_per_100g == 0
    assert catalog.meta["name"] == "Test kit"
    assert catalog.messages("fi") == {"products.flashlight": "Taskulamppu"}
    assert catalog.messages("sv") == {"products.flashlight": "Flashlight"}


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "nope.json")


def test_load_catalog_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid JSON"):
        load_catalog(path)


def test_load_catalog_invalid_items(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(_doc(_entry(baseQuantity=0))), encoding="utf-8")
    with pytest.raises(ValueError, match="baseQuantity"):
        load_catalog(path)


def test_validate_valid_document():
    result = validate_catalog_data(_doc(_entry()))
    assert result.valid
    assert result.errors == []
    assert result.warnings == []


def test_validate_structure_errors():
    assert validate_catalog_data([]).errors[0].code == "INVALID_ROOT"
    assert [e.code for e in validate_catalog_data({"meta": {}}).errors] == [
        "MISSING_FIELD", "MISSING_FIELD", "INVALID_ITEMS",
    ]
    assert "EMPTY_ITEMS" in [e.code for e in validate_catalog_data(_doc()).errors]


def test_validate_item_errors():
    """Each malformed field is reported with its path."""
    result = validate_catalog_data(_doc(
        _entry(),
        _entry(),
        _entry(id="", category="", unit=""),
        _entry(id="x", baseQuantity="3", scaleWithDays="yes"),
        _entry(id="y", requiresWaterLiters=0, caloriesPerUnit=-5),
    ))
    found = {(e.path, e.code) for e in result.errors}

    assert ("items[1].id", "DUPLICATE_ID") in found
    assert ("items[2].id", "MISSING_FIELD") in found
    assert ("items[2].category", "MISSING_FIELD") in found
    assert ("items[2].unit", "MISSING_FIELD") in found
    assert ("items[3].baseQuantity", "INVALID_NUMBER") in found
    assert ("items[3].scale_with_days", "INVALID_BOOLEAN") in found
    assert ("items[4].requires_water_liters", "INVALID_NUMBER") in found
    assert ("items[4].calories_per_unit", "INVALID_NUMBER") in found
    assert not result.valid


def test_validate_unknown_category_and_unit_warn():
    result = validate_catalog_data(_doc(_entry(category="garden", unit="bushels")))
    assert result.valid
    assert {w.code for w in result.warnings} == {"UNKNOWN_CATEGORY", "UNKNOWN_UNIT"}


def test_effective_catalog():
    """Disabled and freezer items are dropped as appropriate."""
    items = [
        RecommendedItemDefinition(
            id="frozen-meals", i18n_key="products.frozen-meals", category="food",
            base_quantity=1, unit="pieces", requires_freezer=True,
        ),
        RecommendedItemDefinition(
            id="rice", i18n_key="products.rice", category="food",
            base_quantity=0.1, unit="kilograms",
        ),
        RecommendedItemDefinition(
            id="cash", i18n_key="products.cash", category="cash-documents",
            base_quantity=300, unit="euros",
        ),
    ]
    no_freezer = HouseholdConfig(use_freezer=False)
    freezer = HouseholdConfig(use_freezer=True)

    assert [i.id for i in effective_catalog(items, no_freezer)] == ["rice", "cash"]
    assert [i.id for i in effective_catalog(items, freezer, ["cash"])] == [
        "frozen-meals", "rice",
    ]
