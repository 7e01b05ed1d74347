#!/usr/bin/env python3
"""Browse paginated backtest execution records."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import pandas as pd
import requests

from hodlit.client import HodlClient
from hodlit.config import AppSettings
from hodlit.errors import ApiError
from hodlit.pagination import compute_window
from hodlit.schemas import BacktestPage, BacktestRecordFrame, BacktestStatus, status_text


def _status(value: str) -> int:
    try:
        return int(BacktestStatus(int(value)))
    except ValueError as exc:  # pragma: no cover - argparse error path
        raise argparse.ArgumentTypeError(f"Unknown status code: {value}") from exc


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    listing = commands.add_parser("list", help="Show one page of records.")
    listing.add_argument("--page", type=int, default=1, help="Page number (default: 1).")
    listing.add_argument("--page-size", type=int, default=10, help="Records per page (default: 10).")
    listing.add_argument("--symbol", help="Filter by symbol.")
    listing.add_argument("--status", type=_status, help="Filter by status code (0-5).")

    detail = commands.add_parser("detail", help="Show one record in full.")
    detail.add_argument("symbol")
    detail.add_argument("--id", dest="record_id", help="Record id.")

    return parser.parse_args(argv)


def render_page(page: BacktestPage) -> str:
    """Return the record table followed by the pagination summary."""

    info = page.pagination
    if page.records:
        table = BacktestRecordFrame.from_records(page.records).to_string(index=False)
    else:
        table = "No records."
    window = " ".join(
        f"[{number}]" if number == info.current_page else str(number)
        for number in compute_window(info.current_page, info.total_pages)
    )
    summary = f"{info.total_count} records, page {info.current_page}/{info.total_pages}"
    return f"{table}\n{summary}\n{window}".rstrip()


def run(args: argparse.Namespace, client: HodlClient) -> None:
    if args.command == "list":
        page = client.backtest.list_records(
            args.page, args.page_size, args.symbol, args.status)
        print(render_page(page))
    elif args.command == "detail":
        detail = client.backtest.get_detail(args.symbol.lower(), args.record_id)
        fields = detail.model_dump(exclude_none=True, exclude_defaults=True)
        if not fields:
            print("No detail available.")
            return
        if "status" in fields:
            fields.setdefault("status_text", status_text(detail.status))
        print(pd.Series(fields).to_string())


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = AppSettings()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    with HodlClient.from_settings(settings) as client:
        try:
            run(args, client)
        except ApiError as exc:
            print(f"{exc.kind.value}: {exc.message}", file=sys.stderr)
            return 1
        except requests.RequestException as exc:
            print(f"network error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
