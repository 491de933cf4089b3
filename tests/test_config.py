"""Tests for stockpile config loading."""

import os
import tempfile

from stockpile.config import (
    DEFAULT_INVENTORY_PATH,
    StockpileConfig,
    load_config,
)
from stockpile.constants import STANDARD_CATEGORIES
from stockpile.models import CalculationOptions, HouseholdConfig


def _load_toml(content: bytes) -> StockpileConfig:
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(content)
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)
    return config


def test_load_config_defaults(monkeypatch):
    """Loading with no path returns all defaults."""
    monkeypatch.delenv("STOCKPILE_INVENTORY", raising=False)
    config = load_config()
    assert isinstance(config, StockpileConfig)
    assert config.household.to_household() == HouseholdConfig()
    assert config.calculation.to_options() == CalculationOptions()
    assert config.alerts.expiring_soon_days == 30
    assert config.alerts.dismissed == []
    assert config.catalog.path == ""
    assert config.catalog.language == "en"
    assert config.catalog.categories == list(STANDARD_CATEGORIES)
    assert config.inventory.path == DEFAULT_INVENTORY_PATH


def test_load_config_nonexistent_file():
    """Loading a nonexistent file returns defaults."""
    config = load_config("/nonexistent/path.toml")
    assert config.household.adults == 2


def test_load_config_from_toml():
    """Loading a valid TOML file populates config."""
    config = _load_toml(b"""\
[household]
adults = 3
children = 2
supply_duration_days = 7
use_freezer = true
pets = 1

[calculation]
children_multiplier = 0.75
daily_water_per_person = 2.5

[alerts]
expiring_soon_days = 14
dismissed = ["expired-42"]

[catalog]
path = "/etc/stockpile/catalog.json"
language = "fi"
disabled_items = ["cash"]

[inventory]
path = "/srv/inventory.json"
""")

    assert config.household.to_household() == HouseholdConfig(
        adults=3, children=2, supply_duration_days=7, use_freezer=True, pets=1
    )
    assert config.calculation.to_options() == CalculationOptions(
        children_multiplier=0.75, daily_water_per_person=2.5
    )
    assert config.alerts.expiring_soon_days == 14
    assert config.alerts.dismissed == ["expired-42"]
    assert config.catalog.path == "/etc/stockpile/catalog.json"
    assert config.catalog.language == "fi"
    assert config.catalog.disabled_items == ["cash"]
    assert config.inventory.path == "/srv/inventory.json"


def test_load_config_env_override(monkeypatch):
    """The environment variable fills in an unset inventory path."""
    monkeypatch.setenv("STOCKPILE_INVENTORY", "/tmp/env-inventory.json")
    config = load_config()
    assert config.inventory.path == "/tmp/env-inventory.json"


def test_load_config_file_path_takes_precedence(monkeypatch):
    """Config file inventory path takes precedence over env var."""
    monkeypatch.setenv("STOCKPILE_INVENTORY", "/tmp/env-inventory.json")
    config = _load_toml(b"""\
[inventory]
path = "/srv/file-inventory.json"
""")
    assert config.inventory.path == "/srv/file-inventory.json"


def test_load_config_custom_categories():
    """Custom categories are appended after the standard ones."""
    config = _load_toml(b"""\
[catalog]
categories = ["garden", "food"]
""")
    assert config.catalog.categories == [*STANDARD_CATEGORIES, "garden"]


def test_load_config_partial_toml():
    """Partial TOML uses defaults for missing sections."""
    config = _load_toml(b"""\
[household]
adults = 1
""")
    assert config.household.adults == 1
    assert config.household.supply_duration_days == 3
    assert config.alerts.expiring_soon_days == 30
