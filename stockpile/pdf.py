"""PDF generation for shopping lists using ReportLab."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from .alerts import TranslationFunction, get_translated_item_name
from .shopping import ShoppingEntry, category_label, format_quantity, unit_label

FONT_NAME = "Helvetica"
FONT_NAME_BOLD = "Helvetica-Bold"


def generate_shopping_list_pdf(
    grouped: dict[str, list[ShoppingEntry]],
    t: TranslationFunction,
    output_path: str | Path,
    generated: date | None = None,
) -> Path:
    """Generate a PDF file from a grouped shopping list.

    Args:
        grouped: Entries by category, as returned by ``build_shopping_list``.
        t: Translation lookup.
        output_path: Where to save the PDF file.
        generated: Date printed under the title. Defaults to today.

    Returns:
        Path to the generated PDF file.

    Raises:
        ImportError: If reportlab is not installed.
    """
    try:
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
        from reportlab.lib.units import mm
        from reportlab.platypus import (
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
            TableStyle,
        )
    except ImportError:
        raise ImportError(
            "reportlab is required: pip install 'stockpile[pdf]'"
        )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    generated = generated or date.today()

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title=t("shoppingList.title"),
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ListTitle",
        parent=styles["Title"],
        fontName=FONT_NAME_BOLD,
        fontSize=18,
        leading=24,
    )
    subtitle_style = ParagraphStyle(
        "ListSubtitle",
        parent=styles["Normal"],
        fontName=FONT_NAME,
        fontSize=10,
        leading=14,
        textColor=colors.grey,
    )
    heading_style = ParagraphStyle(
        "CategoryHeading",
        parent=styles["Heading2"],
        fontName=FONT_NAME_BOLD,
        fontSize=13,
        leading=18,
        spaceBefore=4 * mm,
        spaceAfter=2 * mm,
    )
    body_style = ParagraphStyle(
        "Body",
        parent=styles["Normal"],
        fontName=FONT_NAME,
        fontSize=10,
        leading=14,
    )

    elements: list = []
    elements.append(Paragraph(t("shoppingList.title"), title_style))
    elements.append(
        Paragraph(f"{t('shoppingList.generated')}: {generated.isoformat()}", subtitle_style)
    )
    elements.append(Spacer(1, 6 * mm))

    if not any(grouped.values()):
        elements.append(Paragraph(t("shoppingList.noItems"), body_style))
        doc.build(elements)
        return output_path

    table_style = TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#E67E22")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), FONT_NAME_BOLD),
        ("FONTNAME", (0, 1), (-1, -1), FONT_NAME),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("ALIGN", (0, 0), (0, -1), "LEFT"),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#FFF3E0")]),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
        ("LEFTPADDING", (0, 0), (-1, -1), 4),
        ("RIGHTPADDING", (0, 0), (-1, -1), 4),
    ])
    col_widths = [70 * mm, 30 * mm, 30 * mm, 35 * mm]

    for category_id, entries in grouped.items():
        if not entries:
            continue
        elements.append(Paragraph(category_label(category_id, t), heading_style))

        table_data = [[
            t("shoppingList.item"),
            t("shoppingList.current"),
            t("shoppingList.recommended"),
            t("shoppingList.needed"),
        ]]
        for entry in entries:
            unit = unit_label(entry.unit, t)
            table_data.append([
                get_translated_item_name(entry.item, t),
                format_quantity(entry.current),
                format_quantity(entry.recommended),
                f"{format_quantity(entry.needed)} {unit}",
            ])
        table = Table(table_data, colWidths=col_widths)
        table.setStyle(table_style)
        elements.append(table)

    doc.build(elements)
    return output_path
