"""Datetime utilities"""
from datetime import datetime


def format_datetime(dt: datetime) -> str:
    """Format datetime to ISO string"""
    if dt is None:
        return None
    return dt.isoformat()


def parse_datetime(value) -> datetime:
    """Parse ISO datetime string, passing datetimes through"""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
