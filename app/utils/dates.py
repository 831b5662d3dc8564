from datetime import date, datetime
from typing import Optional
import pytz
from app.config import settings


def today_in_timezone(timezone: str = settings.DEFAULT_TIMEZONE) -> date:
    return datetime.now(pytz.timezone(timezone)).date()


def calculate_age(birthdate: date, today: Optional[date] = None) -> int:
    """Whole years elapsed; the birthday itself counts as the new year."""
    today = today or today_in_timezone()
    had_birthday = (today.month, today.day) >= (birthdate.month, birthdate.day)
    return today.year - birthdate.year - (0 if had_birthday else 1)
