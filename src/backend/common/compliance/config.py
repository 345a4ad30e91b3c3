from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .constants import DEFAULT_WORKDAY_END_HOUR, DEFAULT_WORKDAY_START_HOUR
from .errors import ConfigurationError
from .models import WorkingHours


load_dotenv()


@dataclass(frozen=True)
class ComplianceConfig:
    working_hours: WorkingHours = field(default_factory=WorkingHours)
    default_jurisdiction: str = ""
    log_level: str = "INFO"


def get_compliance_config() -> ComplianceConfig:
    """
    Load host-level settings from environment variables (a `.env` file is honored).

    Reads:
      SWPPP_WORKDAY_START_HOUR, SWPPP_WORKDAY_END_HOUR,
      SWPPP_DEFAULT_JURISDICTION, SWPPP_LOG_LEVEL
    """
    working_hours = WorkingHours(
        start_hour=_int_env("SWPPP_WORKDAY_START_HOUR", DEFAULT_WORKDAY_START_HOUR),
        end_hour=_int_env("SWPPP_WORKDAY_END_HOUR", DEFAULT_WORKDAY_END_HOUR),
    )
    return ComplianceConfig(
        working_hours=working_hours,
        default_jurisdiction=os.getenv("SWPPP_DEFAULT_JURISDICTION", "").strip().upper(),
        log_level=os.getenv("SWPPP_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer hour, got {raw!r}.") from exc
