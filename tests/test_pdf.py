"""Tests for shopping list PDF generation."""

from datetime import date
from unittest.mock import patch

import pytest

from stockpile.messages import make_translator
from stockpile.models import HouseholdConfig, InventoryItem, RecommendedItemDefinition
from stockpile.shopping import build_shopping_list


def _grouped():
    catalog = [
        RecommendedItemDefinition(
            id="bottled-water", i18n_key="products.bottled-water",
            category="water-beverages", base_quantity=3, unit="liters",
            scale_with_people=True, scale_with_days=True,
        ),
    ]
    items = [
        InventoryItem(
            id="1", name="Water", category_id="water-beverages", quantity=2,
            unit="liters", item_type="bottled-water",
        ),
        InventoryItem(
            id="2", name="Euro cash", category_id="cash-documents", quantity=50,
            unit="euros", recommended_quantity=300,
        ),
    ]
    return build_shopping_list(items, HouseholdConfig(), catalog)


class TestPDFGeneration:
    def test_generate_pdf_import_error(self, tmp_path):
        """A missing reportlab raises ImportError with an install hint."""
        from stockpile.pdf import generate_shopping_list_pdf

        with patch.dict("sys.modules", {"reportlab": None, "reportlab.lib": None}):
            with pytest.raises(ImportError, match="stockpile\\[pdf\\]"):
                generate_shopping_list_pdf(_grouped(), make_translator(), tmp_path / "x.pdf")

    def test_generate_pdf_creates_file(self, tmp_path):
        """generate_shopping_list_pdf writes a valid PDF file."""
        pytest.importorskip("reportlab")
        from stockpile.pdf import generate_shopping_list_pdf

        output = tmp_path / "shopping.pdf"
        result = generate_shopping_list_pdf(
            _grouped(), make_translator(), output, generated=date(2025, 5, 1)
        )
        assert result == output
        assert output.stat().st_size > 0
        with open(output, "rb") as f:
            assert f.read(4) == b"%PDF"

    def test_generate_pdf_creates_parent_dirs(self, tmp_path):
        pytest.importorskip("reportlab")
        from stockpile.pdf import generate_shopping_list_pdf

        output = tmp_path / "subdir" / "nested" / "shopping.pdf"
        generate_shopping_list_pdf(_grouped(), make_translator(), output)
        assert output.exists()

    def test_generate_pdf_empty_list(self, tmp_path):
        """An empty shopping list still produces a document."""
        pytest.importorskip("reportlab")
        from stockpile.pdf import generate_shopping_list_pdf

        output = tmp_path / "empty.pdf"
        generate_shopping_list_pdf({}, make_translator(), output)
        assert output.exists()
