"""
LedgerView Value Formatters

Render transaction field values as the text the device displays.

- Hashes and addresses: checksummed hex
- Public keys: two-digit algorithm tag followed by checksummed hex
- Amounts: digits grouped by three with spaces, suffixed with " motes"
- Timestamps: RFC 3339 / ISO-8601 UTC at seconds resolution
- Durations: compact human units ("1day", "2h 30m")
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from ..canon import checksummed_hex
from ..models import Key, KeyKind, PublicKey, TargetKind, TransferTarget, URef


MOTES_UNIT = "motes"
LATEST_VERSION = "latest"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Calendar approximations used for TTL display
_SECONDS_PER_YEAR = 31_557_600      # 365.25 days
_SECONDS_PER_MONTH = 2_630_016      # 30.44 days
_SECONDS_PER_DAY = 86_400


def group_digits(value: int, separator: str = " ") -> str:
    """
    Group decimal digits in threes from the right.

    Example:
        >>> group_digits(10000000000)
        '10 000 000 000'
    """
    if value < 0:
        return "-" + group_digits(-value, separator)
    return f"{value:,}".replace(",", separator)


def format_amount(motes: int) -> str:
    """Render a motes amount, e.g. '1 000 motes'."""
    return f"{group_digits(motes)} {MOTES_UNIT}"


def format_public_key(key: PublicKey) -> str:
    """Algorithm tag ("01"/"02") followed by the checksummed key bytes."""
    return f"{key.algorithm.value}{checksummed_hex(key.raw)}"


def format_hash(digest: bytes) -> str:
    return checksummed_hex(digest)


def format_uref(uref: URef) -> str:
    """Purses are shown by address only; access rights are not displayed."""
    return checksummed_hex(uref.addr)


def format_key(key: Key) -> str:
    if key.kind is KeyKind.ERA_INFO:
        return f"{KeyKind.ERA_INFO.value}-{key.era}"
    return checksummed_hex(key.addr)


def format_target(target: TransferTarget) -> str:
    """Render a native transfer recipient."""
    if target.kind is TargetKind.BYTES:
        return checksummed_hex(target.value)
    if target.kind is TargetKind.UREF:
        return format_uref(target.value)
    if target.kind is TargetKind.KEY:
        return format_key(target.value)
    return format_public_key(target.value)


def format_timestamp(millis: int) -> str:
    """
    Render milliseconds since the Unix epoch at seconds resolution.

    Example:
        >>> format_timestamp(1_620_137_455_123)
        '2021-05-04T14:10:55Z'
    """
    moment = _EPOCH + timedelta(seconds=millis // 1000)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def _unit(value: int, name: str, plural: bool) -> Optional[str]:
    if value == 0:
        return None
    suffix = "s" if plural and value > 1 else ""
    return f"{value}{name}{suffix}"


def format_duration(millis: int) -> str:
    """
    Render a duration in compact human units.

    Years and months use 365.25 and 30.44 days respectively; zero units are
    omitted.

    Example:
        >>> format_duration(86_400_000)
        '1day'
        >>> format_duration(9_000_000)
        '2h 30m'
    """
    if millis == 0:
        return "0s"

    seconds, ms = divmod(millis, 1000)
    years, rest = divmod(seconds, _SECONDS_PER_YEAR)
    months, rest = divmod(rest, _SECONDS_PER_MONTH)
    days, rest = divmod(rest, _SECONDS_PER_DAY)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)

    parts = [
        _unit(years, "year", True),
        _unit(months, "month", True),
        _unit(days, "day", True),
        _unit(hours, "h", False),
        _unit(minutes, "m", False),
        _unit(secs, "s", False),
        _unit(ms, "ms", False),
    ]
    return " ".join(p for p in parts if p)


def format_version(version: Optional[int]) -> str:
    return LATEST_VERSION if version is None else str(version)
