from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import Optional, Sequence

import orjson

from .api import serialize_page
from .core import ViewState
from .domain import EventCategory, EventSearch, ViewMode
from .logging import configure_logging
from .render import render_page
from .services import CalendarService, ServiceContext
from .services.http import run_local_server


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shared calendar command line interface.")
    parser.add_argument("--log-level", default=None, help="Override CALENDAR_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("serve", help="Start the HTTP API.")
    api_parser.add_argument("--host", default=None)
    api_parser.add_argument("--port", type=int, default=None)

    view_parser = subparsers.add_parser("view", help="Print a month, week or day of the calendar.")
    view_parser.add_argument("--mode", choices=[mode.value for mode in ViewMode], default=ViewMode.MONTH.value)
    view_parser.add_argument("--date", type=date.fromisoformat, default=None, help="Anchor date, YYYY-MM-DD.")
    view_parser.add_argument(
        "--shift",
        type=int,
        default=0,
        help="Move this many periods forward (negative for backward) from the anchor.",
    )
    view_parser.add_argument("--category", choices=[category.value for category in EventCategory], default=None)
    view_parser.add_argument("--json", action="store_true", help="Emit the projected page as JSON.")

    return parser


def _run_view(args: argparse.Namespace, context: ServiceContext) -> None:
    view = ViewState(anchor=args.date or date.today(), mode=ViewMode(args.mode))
    for _ in range(abs(args.shift)):
        if args.shift > 0:
            view.go_to_next()
        else:
            view.go_to_previous()

    search = EventSearch(category=EventCategory(args.category) if args.category else None)
    page = CalendarService(context).render(view, search)
    if args.json:
        sys.stdout.buffer.write(orjson.dumps(serialize_page(page), option=orjson.OPT_INDENT_2) + b"\n")
    else:
        print(render_page(page))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logging.getLogger(__name__).info("Shared calendar CLI starting: %s", args.command)

    context = ServiceContext()
    if args.command == "serve":
        server = context.settings.server
        run_local_server(host=args.host or server.host, port=args.port or server.port, context=context)
    elif args.command == "view":
        _run_view(args, context)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
