import json
from datetime import datetime, timedelta
from typing import Any, Dict, Optional


def _month_ago(now: datetime) -> datetime:
    year, month = (now.year - 1, 12) if now.month == 1 else (now.year, now.month - 1)
    day = now.day
    while True:
        try:
            return now.replace(year=year, month=month, day=day)
        except ValueError:
            day -= 1


def period_start(period: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """Lower bound for a report period in local time, or None for "all"."""
    now = now or datetime.now().astimezone()
    if period == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "week":
        return now - timedelta(days=7)
    if period == "month":
        return _month_ago(now)
    return None


def decode_result(row: Dict[str, Any]) -> Dict[str, Any]:
    decoded = dict(row)
    raw = row.get("result")
    if isinstance(raw, str):
        try:
            decoded["result"] = json.loads(raw)
        except ValueError:
            pass
    return decoded
