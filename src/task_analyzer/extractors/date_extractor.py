"""
Due date extraction from relative date phrases.

Phrase groups are tested in a fixed order and the first group that matches
decides the result; rules are never combined.
"""

import calendar
import logging
import re
from datetime import datetime, timedelta
from typing import Optional


WEEKDAYS = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')

MORNING_HOUR = 9
AFTERNOON_HOUR = 14
EVENING_HOUR = 18

RELATIVE_PATTERNS = (
    (re.compile(r'in (\d+) days?'), 'days'),
    (re.compile(r'in (\d+) weeks?'), 'weeks'),
    (re.compile(r'in (\d+) months?'), 'months'),
)


def at_hour(moment: datetime, hour: int) -> datetime:
    """Same calendar day as ``moment`` at ``hour``:00:00, tzinfo preserved."""
    return moment.replace(hour=hour, minute=0, second=0, microsecond=0)


def add_months(moment: datetime, months: int) -> datetime:
    """Add calendar months, clamping the day to the length of the target month."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def next_weekday(now: datetime, weekday: int) -> datetime:
    """Next occurrence of ``weekday`` (Monday=0) strictly after ``now``."""
    days_ahead = weekday - now.weekday()
    if days_ahead <= 0:
        days_ahead += 7
    return now + timedelta(days=days_ahead)


class DueDateExtractor:
    """Resolves phrases like "tomorrow morning" or "in 3 weeks" against a reference time."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def extract(self, text: str, now: datetime) -> Optional[datetime]:
        """
        Extract a due date from text.

        Args:
            text: Task text
            now: Reference time that relative phrases resolve against

        Returns:
            The inferred due date, or None when no phrase is recognized
        """
        text_lower = text.lower()

        for rule in (
            self._same_day,
            self._next_day,
            self._weekday,
            self._relative_period,
            self._numeric_offset,
        ):
            due_date = rule(text_lower, now)
            if due_date is not None:
                self.logger.debug(f"Due date {due_date.isoformat()} matched by {rule.__name__}")
                return due_date

        return None

    def _same_day(self, text_lower: str, now: datetime) -> Optional[datetime]:
        if 'today' not in text_lower and 'tonight' not in text_lower:
            return None

        if 'morning' in text_lower:
            return at_hour(now, MORNING_HOUR)
        elif 'afternoon' in text_lower:
            return at_hour(now, AFTERNOON_HOUR)
        elif 'evening' in text_lower or 'tonight' in text_lower:
            return at_hour(now, EVENING_HOUR)
        return now

    def _next_day(self, text_lower: str, now: datetime) -> Optional[datetime]:
        if 'tomorrow' not in text_lower:
            return None

        tomorrow = now + timedelta(days=1)
        if 'morning' in text_lower:
            return at_hour(tomorrow, MORNING_HOUR)
        elif 'afternoon' in text_lower:
            return at_hour(tomorrow, AFTERNOON_HOUR)
        return tomorrow

    def _weekday(self, text_lower: str, now: datetime) -> Optional[datetime]:
        for index, day in enumerate(WEEKDAYS):
            if day in text_lower:
                return next_weekday(now, index)
        return None

    def _relative_period(self, text_lower: str, now: datetime) -> Optional[datetime]:
        if 'next week' in text_lower:
            return now + timedelta(weeks=1)
        if 'next month' in text_lower:
            return add_months(now, 1)
        return None

    def _numeric_offset(self, text_lower: str, now: datetime) -> Optional[datetime]:
        for pattern, unit in RELATIVE_PATTERNS:
            match = pattern.search(text_lower)
            if not match:
                continue

            try:
                amount = int(match.group(1))
                if unit == 'days':
                    return now + timedelta(days=amount)
                elif unit == 'weeks':
                    return now + timedelta(weeks=amount)
                return add_months(now, amount)
            except (OverflowError, ValueError):
                # Oversized numbers and offsets past datetime.max are no match
                self.logger.debug(f"Offset out of range: {match.group(0)}")
                return None

        return None
