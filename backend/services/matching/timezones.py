"""Timezone identifier resolution to UTC offsets.

Resolution never raises: callers receive a TimezoneResolution and branch on
`resolved`. Accepted identifiers:
    IANA names        "Europe/Berlin", "America/New_York"
    UTC aliases       "UTC", "GMT", "Z"
    fixed offsets     "+05:30", "-0800", "UTC+2", "GMT-03:00"
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

_UTC_ALIASES = {"utc", "gmt", "z", "zulu", "etc/utc", "etc/gmt"}
_FIXED_OFFSET_RE = re.compile(
    r"^(?:utc|gmt)?\s*(?P<sign>[+-])\s*(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)
MAX_OFFSET_HOURS = 14


@dataclass(frozen=True)
class TimezoneResolution:
    identifier: str
    offset_hours: Optional[float] = None
    error: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.offset_hours is not None


def _unresolved(identifier: str, error: str) -> TimezoneResolution:
    return TimezoneResolution(identifier=identifier, error=error)


def _parse_fixed_offset(identifier: str) -> Optional[TimezoneResolution]:
    m = _FIXED_OFFSET_RE.match(identifier)
    if not m:
        return None
    hours = int(m.group("hours"))
    minutes = int(m.group("minutes") or 0)
    if minutes >= 60 or hours + minutes / 60 > MAX_OFFSET_HOURS:
        return _unresolved(identifier, "offset out of range")
    sign = -1 if m.group("sign") == "-" else 1
    return TimezoneResolution(identifier=identifier, offset_hours=sign * (hours + minutes / 60))


def resolve_utc_offset(identifier: Optional[str], at: Optional[datetime] = None) -> TimezoneResolution:
    """Resolve a timezone identifier to its UTC offset in hours at instant `at`."""
    name = (identifier or "").strip()
    if not name:
        return _unresolved("", "unset")
    if name.lower() in _UTC_ALIASES:
        return TimezoneResolution(identifier=name, offset_hours=0.0)

    fixed = _parse_fixed_offset(name)
    if fixed is not None:
        return fixed

    try:
        zone = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        return _unresolved(name, f"unknown timezone: {e}")

    if at is None:
        at = datetime.now(timezone.utc)
    elif at.tzinfo is None:
        at = at.replace(tzinfo=timezone.utc)

    offset = at.astimezone(zone).utcoffset()
    if offset is None:
        return _unresolved(name, "no utc offset")
    return TimezoneResolution(identifier=name, offset_hours=offset.total_seconds() / 3600)
