"""CLI entry point for the stockpile tools."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from .alerts import TranslationFunction, count_alerts, filter_dismissed, generate_alerts
from .catalog import effective_catalog, load_catalog
from .categories import calculate_all_category_statuses, calculate_preparedness_score
from .config import StockpileConfig, load_config
from .inventory import InventorySnapshot, load_inventory
from .messages import DEFAULT_MESSAGES, make_translator
from .models import CalculationOptions, HouseholdConfig, RecommendedItemDefinition
from .shopping import build_shopping_list, category_label, format_shopping_list

logger = logging.getLogger(__name__)

STATUS_MARKS = {"ok": "✓", "warning": "!", "critical": "✗"}


@dataclass
class _Session:
    config: StockpileConfig
    snapshot: InventorySnapshot
    household: HouseholdConfig
    options: CalculationOptions
    catalog: list[RecommendedItemDefinition]
    t: TranslationFunction


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="stockpile",
        description="Check household emergency supplies against recommendations",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to the configuration file (TOML)",
    )
    parser.add_argument(
        "--inventory",
        "-i",
        type=str,
        default=None,
        help="Inventory JSON file (overrides the configured path)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # status
    status_parser = sub.add_parser("status", help="Show per-category status")
    status_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # alerts
    alerts_parser = sub.add_parser("alerts", help="Show expiration and stock alerts")
    alerts_parser.add_argument("--json", action="store_true", help="Output as JSON")
    alerts_parser.add_argument(
        "--all", action="store_true", dest="show_all",
        help="Include dismissed alerts",
    )

    # shopping
    shopping_parser = sub.add_parser("shopping", help="List items to restock")
    shopping_parser.add_argument("--json", action="store_true", help="Output as JSON")
    shopping_parser.add_argument(
        "--pdf", type=str, default=None, metavar="FILE",
        help="Write the shopping list to a PDF file",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args.config)
        session = _open_session(config, args.inventory)
        match args.command:
            case "status":
                _cmd_status(session, args)
            case "alerts":
                _cmd_alerts(session, args)
            case "shopping":
                _cmd_shopping(session, args)
    except (FileNotFoundError, ValueError, ImportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _open_session(config: StockpileConfig, inventory_path: str | None) -> _Session:
    snapshot = load_inventory(inventory_path or config.inventory.path)
    household = snapshot.household or config.household.to_household()

    catalog = load_catalog(config.catalog.path or None)
    disabled = [*config.catalog.disabled_items, *snapshot.disabled_recommended_items]
    items = effective_catalog(catalog.items, household, disabled)
    logger.debug(
        "Using %d of %d recommended items", len(items), len(catalog.items)
    )

    t = make_translator({**DEFAULT_MESSAGES, **catalog.messages(config.catalog.language)})
    return _Session(
        config=config,
        snapshot=snapshot,
        household=household,
        options=config.calculation.to_options(),
        catalog=items,
        t=t,
    )


def _cmd_status(session: _Session, args) -> None:
    statuses = calculate_all_category_statuses(
        session.config.catalog.categories,
        session.snapshot.items,
        session.household,
        session.catalog,
        options=session.options,
    )
    score = calculate_preparedness_score(statuses)

    if args.json:
        data = {
            "preparedness_score": score,
            "categories": [s.summary_dict() for s in statuses],
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    print(f"Preparedness: {score}%")
    print()
    for s in statuses:
        name = category_label(s.category_id, session.t)
        mark = STATUS_MARKS.get(s.status, "?")
        if s.primary_unit:
            totals = f"{s.total_actual:g}/{s.total_needed:g} {s.primary_unit}"
        else:
            totals = f"{s.total_actual:g}/{s.total_needed:g}"
        print(f"  {mark} {name:<24} {s.completion_percentage:>3}%  {totals}")
        for shortage in s.shortages:
            label = session.t(shortage.item_name)
            if label == shortage.item_name:
                label = shortage.item_id
            print(f"      - {label}: missing {shortage.missing:g} {shortage.unit}")


def _cmd_alerts(session: _Session, args) -> None:
    alerts = generate_alerts(
        session.snapshot.items,
        session.t,
        session.household,
        session.catalog,
        options=session.options,
        expiring_soon_days=session.config.alerts.expiring_soon_days,
    )
    if not args.show_all:
        dismissed = [
            *session.config.alerts.dismissed,
            *session.snapshot.dismissed_alert_ids,
        ]
        alerts = filter_dismissed(alerts, dismissed)
    counts = count_alerts(alerts)

    if args.json:
        data = {
            "counts": {
                "critical": counts.critical,
                "warning": counts.warning,
                "info": counts.info,
                "total": counts.total,
            },
            "alerts": [
                {
                    "id": a.id,
                    "type": a.type,
                    "message": a.message,
                    "item_name": a.item_name,
                }
                for a in alerts
            ],
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    if not alerts:
        print("No alerts.")
        return
    print(
        f"{counts.total} alerts "
        f"({counts.critical} critical, {counts.warning} warning, {counts.info} info):"
    )
    for a in alerts:
        prefix = f"{a.item_name}: " if a.item_name else ""
        print(f"  [{a.type}] {prefix}{a.message}")


def _cmd_shopping(session: _Session, args) -> None:
    grouped = build_shopping_list(
        session.snapshot.items, session.household, session.catalog, session.options
    )

    if args.json:
        data = {
            category_id: [
                {
                    "id": e.item.id,
                    "name": e.item.name,
                    "current": e.current,
                    "recommended": e.recommended,
                    "needed": e.needed,
                    "unit": e.unit,
                }
                for e in entries
            ]
            for category_id, entries in grouped.items()
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        print(format_shopping_list(grouped, session.t))

    if args.pdf:
        from .pdf import generate_shopping_list_pdf

        path = generate_shopping_list_pdf(grouped, session.t, Path(args.pdf))
        print(f"Saved PDF: {path}", file=sys.stderr)
