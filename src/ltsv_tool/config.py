"""Environment-driven settings and logging setup."""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass
from pathlib import Path

DECODE_ERROR_HANDLERS = ("strict", "replace", "ignore", "backslashreplace", "surrogateescape")


@dataclass(frozen=True, slots=True)
class Settings:
    encoding: str = "utf-8"
    decode_errors: str = "replace"
    base_dir: Path | None = None


def load_settings() -> Settings:
    """Build settings from ``LTSV_*`` environment variables."""
    encoding = os.getenv("LTSV_ENCODING") or "utf-8"
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ValueError(f"LTSV_ENCODING is not a known codec: {encoding}") from exc

    decode_errors = os.getenv("LTSV_DECODE_ERRORS") or "replace"
    if decode_errors not in DECODE_ERROR_HANDLERS:
        allowed = ", ".join(DECODE_ERROR_HANDLERS)
        raise ValueError(f"LTSV_DECODE_ERRORS must be one of: {allowed}")

    raw_base = os.getenv("LTSV_BASE_DIR")
    base_dir = Path(raw_base).resolve() if raw_base else None
    return Settings(encoding=encoding, decode_errors=decode_errors, base_dir=base_dir)


def configure_logging(default_level: str = "WARNING") -> None:
    """Configure stderr logging; ``LTSV_LOG_LEVEL`` overrides the default level."""
    level_name = os.getenv("LTSV_LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
