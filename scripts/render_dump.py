#!/usr/bin/env python3
"""Render a PostNL card from a JSON dump of card config and entity states.

The dump file holds two keys: ``config`` (the card definition) and
``states`` (entity id → state object with ``attributes``).

Usage
-----
    python scripts/render_dump.py dump.json
    python scripts/render_dump.py --tab letters --now 2026-03-10T12:00:00+01:00 dump.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from pypostnl import PostNLConfigError, PostNLPanel
from pypostnl.config import CardConfig
from pypostnl.presentation import PanelView, Section

MAX_VAL_WIDTH = 48


def _truncate(val: str, width: int = MAX_VAL_WIDTH) -> str:
    if len(val) <= width:
        return val
    return val[: width - 3] + "..."


def _print_section(section: Section, headers: tuple[str, ...]) -> None:
    print(f"\n{section.heading}")
    if section.is_empty:
        print(f"  {section.empty_message}")
        return

    rows = [(_truncate(r.title), _truncate(r.status), r.date) for r in section.rows]
    title_w = max(len(headers[1]), *(len(r[0]) for r in rows))
    status_w = max(len(headers[2]), *(len(r[1]) for r in rows))
    header = f"  {headers[1]:<{title_w}}  {headers[2]:<{status_w}}  {headers[3]}"
    print(header)
    print("  " + "─" * (len(header) - 2))
    for title, status, date in rows:
        print(f"  {title:<{title_w}}  {status:<{status_w}}  {date}")


def _print_view(view: PanelView) -> None:
    print(f"{view.name} [{view.icon}]")
    if view.unavailable:
        print(view.unavailable_message)
        return
    print("  ".join(f"{item.count} {item.label}" for item in view.summary))
    print(" | ".join(f"*{label}*" if tab == view.active_tab else label for tab, label in view.tabs))
    if view.preview_image:
        print(f"Preview: {view.preview_image}")
    for section in view.sections:
        _print_section(section, view.column_headers)


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a PostNL card from a dump file.")
    parser.add_argument("dump", help="JSON file with 'config' and 'states'")
    parser.add_argument("--tab", choices=["shipments", "letters"], default="shipments", help="Tab to render")
    parser.add_argument("--now", help="Reference time (ISO-8601); defaults to the current time")
    parser.add_argument("--language", help="Host language used when the card sets none")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    dump = json.loads(Path(args.dump).read_text(encoding="utf-8"))
    try:
        config = CardConfig.from_mapping(dump.get("config") or {})
    except PostNLConfigError as exc:
        print(f"Invalid card configuration: {exc}", file=sys.stderr)
        sys.exit(2)

    panel = PostNLPanel(config)
    now = datetime.fromisoformat(args.now) if args.now else None
    panel.update(dump.get("states") or {}, now=now, ambient_language=args.language)

    if args.tab != panel.view.active_tab and args.tab in panel.view.available_tabs:
        panel.select_tab(args.tab)

    _print_view(panel.render())


if __name__ == "__main__":
    main()
