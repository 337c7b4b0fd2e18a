"""
Turns the raw daily_json.js document into a RateTable.

Expected shape:
    {"Date": "...", "Valute": {"USD": {"Nominal": 1, "Value": 90.1, ...}, ...}}
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from apps.exchange.domain.errors import ExternalSourceError
from apps.exchange.domain.models import RateEntry, RateTable, normalize_code

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_date(raw: Any) -> Optional[datetime]:
    if not isinstance(raw, str):
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        logger.warning(f"Ignoring unparseable rates date: {raw!r}")
        return None


def _parse_entry(code: str, raw: Any) -> RateEntry:
    if not isinstance(raw, dict):
        raise ExternalSourceError(f"Rate entry for {code} is not an object")

    nominal = raw.get("Nominal")
    value = raw.get("Value")
    if not _is_number(nominal) or not _is_number(value):
        raise ExternalSourceError(f"Rate entry for {code} has non-numeric Value/Nominal")

    previous = raw.get("Previous")
    num_code = raw.get("NumCode")
    try:
        return RateEntry(
            code=code,
            nominal=nominal,
            value=value,
            name=raw.get("Name"),
            num_code=str(num_code) if num_code is not None else None,
            previous=previous if _is_number(previous) else None,
        )
    except ValueError as e:
        raise ExternalSourceError(f"Invalid rate entry for {code}: {e}") from e


def parse_daily_json(body: bytes) -> RateTable:
    """
    Parse the rates document.

    Raises:
        ExternalSourceError: body is not JSON or lacks usable "Valute" entries
    """
    try:
        data = json.loads(body)
    except (ValueError, TypeError) as e:
        raise ExternalSourceError(f"Rates document is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("Valute"), dict):
        raise ExternalSourceError("Rates document has no 'Valute' object")

    entries: Dict[str, RateEntry] = {}
    for raw_code, raw_entry in data["Valute"].items():
        code = normalize_code(raw_code)
        entries[code] = _parse_entry(code, raw_entry)

    return RateTable(entries, date=_parse_date(data.get("Date")))
