#!/usr/bin/env python3
"""Run one birthday-greeting pass locally with console senders.

Reads settings from the environment (and an optional `.env` file at the
repository root). Without `--roster-file` a small built-in roster is used.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import date
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from greetings import (  # noqa: E402
    BirthdaysOn,
    ChatHandler,
    DispatchSettings,
    EmailHandler,
    EmployeeSource,
    InMemoryEmployeeSource,
    JsonFileEmployeeSource,
    TransportFailure,
    fixed_clock,
    parse_employee_record,
    publish_batch_report,
    run_greetings_pass,
    send_chat_via_console,
    send_email_via_console,
    system_clock,
)
from greetings.types import Clock  # noqa: E402


def main() -> int:
    args = parse_args()
    _load_env_file(REPO_ROOT / ".env")
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s %(message)s",
    )
    settings = DispatchSettings.from_env()
    clock = fixed_clock(args.today) if args.today is not None else system_clock

    source = build_source(args.roster_file or settings.roster_file, clock)
    if settings.only_today and not args.everyone:
        source = BirthdaysOn(source, clock)

    send_chat = _send_chat_unreachable if args.chat_down else send_chat_via_console
    handlers = [EmailHandler(send_email_via_console), ChatHandler(send_chat)]

    outcome = run_greetings_pass(
        source,
        handlers=handlers,
        max_workers=args.max_workers or settings.max_workers,
        report=publish_batch_report if settings.report_enabled else None,
    )

    print("")
    print("[SUMMARY]")
    print(
        f"status={outcome['status']} error={outcome['error']} "
        f"report_error={outcome['report_error']}"
    )
    result = outcome["result"]
    if result is not None:
        for item in result:
            print(
                f"[RESULT] index={item.index} employee={item.employee.name} "
                f"channel={item.channel} success={item.success} error={item.error}"
            )
    return 0 if outcome["status"] == "all_delivered" else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Send birthday greetings through email/chat console senders."
    )
    parser.add_argument(
        "--roster-file",
        type=Path,
        default=None,
        help="Optional JSON list of employee records.",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Pretend today is this YYYY-MM-DD date.",
    )
    parser.add_argument(
        "--everyone",
        action="store_true",
        help="Greet the whole roster instead of only today's birthdays.",
    )
    parser.add_argument("--max-workers", type=int, default=None)
    parser.add_argument(
        "--chat-down",
        action="store_true",
        help="Simulate an unreachable chat transport.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args()


def build_source(roster_file: Path | None, clock: Clock) -> EmployeeSource:
    if roster_file is not None:
        return JsonFileEmployeeSource(roster_file, clock=clock)
    return InMemoryEmployeeSource(
        parse_employee_record(record, clock=clock) for record in sample_roster()
    )


def sample_roster() -> list[dict[str, object]]:
    return [
        {
            "first_name": "Jane",
            "last_name": "Doe",
            "birth_date": "1990-07-08",
            "address": {"channel": "chat", "to": "jane.handle"},
        },
        {
            "first_name": "Bob",
            "last_name": "Smith",
            "birth_date": "1985-01-01",
            "address": {"channel": "email", "to": "bob@example.com"},
        },
    ]


def _send_chat_unreachable(*, to_handle: str, message: str) -> None:
    raise TransportFailure("unreachable")


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        text = line.strip()
        if not text or text.startswith("#") or "=" not in text:
            continue
        key, value = text.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if value.startswith(("'", '"')) and value.endswith(("'", '"')) and len(value) >= 2:
            value = value[1:-1]
        os.environ.setdefault(key, value)


if __name__ == "__main__":
    sys.exit(main())
