"""
Calendar arithmetic helpers. Month and year additions let an out-of-range day roll into the following month (Jan 31 + 1 month lands in early March), and year spans are measured in 365-day units.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime, timedelta

from config import YEAR_MS


def to_epoch_ms(dt: datetime) -> float:
    return dt.timestamp() * 1000.0


def add_months(dt: datetime, months: int) -> datetime:
    total = dt.year * 12 + (dt.month - 1) + months
    year, month = divmod(total, 12)
    first = dt.replace(year=year, month=month + 1, day=1)
    return first + timedelta(days=dt.day - 1)


def add_years(dt: datetime, years: float) -> datetime:
    """Shift by whole calendar years; a fractional part is truncated toward zero."""
    return add_months(dt, int(years) * 12)


def add_days(dt: datetime, days: int) -> datetime:
    return dt + timedelta(days=days)


def years_between(start: datetime, end: datetime) -> float:
    return (to_epoch_ms(end) - to_epoch_ms(start)) / YEAR_MS
