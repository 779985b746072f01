"""Environment-variable configuration for greeting passes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DispatchSettings:
    max_workers: int = 1
    only_today: bool = True
    roster_file: Path | None = None
    report_enabled: bool = False

    @classmethod
    def from_env(cls) -> DispatchSettings:
        max_workers = env_int("GREETINGS_MAX_WORKERS", default=1)
        if max_workers < 1:
            raise RuntimeError("GREETINGS_MAX_WORKERS must be >= 1")
        roster_raw = os.getenv("GREETINGS_ROSTER_FILE")
        return cls(
            max_workers=max_workers,
            only_today=env_bool("GREETINGS_ONLY_TODAY", default=True),
            roster_file=Path(roster_raw.strip()) if roster_raw and roster_raw.strip() else None,
            report_enabled=env_bool("GREETINGS_REPORT_ENABLED", default=False),
        )


def required_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value.strip()


def env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise RuntimeError(f"Invalid boolean value for {name}: {raw!r}")


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise RuntimeError(f"Invalid integer value for {name}: {raw!r}") from exc
