"""Runtime configuration for the terminal viewer."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping

from odtview.ingestion.parser import DEFAULT_CONTENT_MEMBER


DEFAULT_BOX_WIDTH = 78
MIN_BOX_WIDTH = 20
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def _parse_bool(*, name: str, raw_value: str) -> bool:
    lowered = raw_value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of: {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}")


@dataclass(frozen=True, slots=True)
class ViewerSettings:
    """Validated viewer settings."""

    box_width: int = DEFAULT_BOX_WIDTH
    clear_screen: bool = True
    content_member: str = DEFAULT_CONTENT_MEMBER
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ViewerSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        box_width_raw = source.get("ODTVIEW_BOX_WIDTH", str(DEFAULT_BOX_WIDTH)).strip()
        clear_raw = source.get("ODTVIEW_CLEAR_SCREEN", "true").strip()
        member_raw = source.get("ODTVIEW_CONTENT_MEMBER", DEFAULT_CONTENT_MEMBER).strip()
        log_level_raw = source.get("ODTVIEW_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

        if not box_width_raw:
            raise ValueError("ODTVIEW_BOX_WIDTH cannot be empty")
        if not clear_raw:
            raise ValueError("ODTVIEW_CLEAR_SCREEN cannot be empty")
        if not member_raw:
            raise ValueError("ODTVIEW_CONTENT_MEMBER cannot be empty")
        if log_level_raw not in _LOG_LEVELS:
            raise ValueError(f"ODTVIEW_LOG_LEVEL must be one of: {', '.join(sorted(_LOG_LEVELS))}")

        box_width = _parse_positive_int(name="ODTVIEW_BOX_WIDTH", raw_value=box_width_raw, minimum=MIN_BOX_WIDTH)
        clear_screen = _parse_bool(name="ODTVIEW_CLEAR_SCREEN", raw_value=clear_raw)

        return cls(
            box_width=box_width,
            clear_screen=clear_screen,
            content_member=member_raw,
            log_level=log_level_raw,
        )
