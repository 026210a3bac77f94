import datetime
from typing import Optional, Union

from dateutil import parser as date_parser

from spacetraveling.errors import InvalidArgument

PT_BR_MONTHS = (
    "Jan",
    "Fev",
    "Mar",
    "Abr",
    "Mai",
    "Jun",
    "Jul",
    "Ago",
    "Set",
    "Out",
    "Nov",
    "Dez",
)


def parse_timestamp(value: Optional[str]) -> Optional[datetime.datetime]:
    """Parse a content-source ISO timestamp (e.g. 2021-03-25T19:25:28+0000)."""
    if not value:
        return None
    try:
        parsed = date_parser.isoparse(value)
    except (ValueError, OverflowError, TypeError) as e:
        raise InvalidArgument(f"Invalid timestamp {value!r}: {e}") from e
    return _as_utc(parsed)


def format_date(timestamp: Union[datetime.datetime, str, None]) -> str:
    """Render a timestamp as ``DD Mon YYYY`` in UTC with pt-BR month names."""
    if isinstance(timestamp, str):
        timestamp = parse_timestamp(timestamp)
    if timestamp is None:
        raise InvalidArgument("Cannot format a missing timestamp")

    moment = _as_utc(timestamp)
    month = PT_BR_MONTHS[moment.month - 1]
    return f"{moment.day:02d} {month} {moment.year}"


def is_edited(
    first_publication_date: Optional[datetime.datetime],
    last_publication_date: Optional[datetime.datetime],
) -> bool:
    if first_publication_date is None or last_publication_date is None:
        return False
    return _as_utc(first_publication_date) != _as_utc(last_publication_date)


def _as_utc(value: datetime.datetime) -> datetime.datetime:
    # Naive values are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)
