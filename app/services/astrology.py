from __future__ import annotations
from datetime import date, datetime
from typing import Union
from app.services.compatibility_constants import (
    Sign,
    SIGN_DATES,
    SIGN_DISPLAY,
    CAPRICORN_START,
    CAPRICORN_END,
    FALLBACK_SIGN,
    COMPATIBILITY_MATRIX,
    COMPATIBILITY_CATEGORIES,
)
from app.schemas.profile import SignInfo
from app.utils.logger import get_logger

logger = get_logger(__name__)

DateLike = Union[date, datetime, str]


def _to_date(birthdate: DateLike) -> date:
    if isinstance(birthdate, datetime):
        return birthdate.date()
    if isinstance(birthdate, date):
        return birthdate
    return datetime.strptime(birthdate, "%Y-%m-%d").date()


def calculate_sign(birthdate: DateLike) -> Sign:
    """
    Map a birthdate to its sun sign.

    Capricorn spans the year boundary, so it is checked first; the other
    eleven ranges are disjoint and compared as (month, day) tuples.
    """
    day = _to_date(birthdate)
    month_day = (day.month, day.day)

    if month_day >= CAPRICORN_START or month_day <= CAPRICORN_END:
        return Sign.CAPRICORN

    for sign, start, end in SIGN_DATES:
        if start <= month_day <= end:
            return sign

    logger.warning(f"No sign range matched {month_day}, falling back to {FALLBACK_SIGN.value}")
    return FALLBACK_SIGN


def get_astrology_compatibility(sign1: Union[Sign, str], sign2: Union[Sign, str]) -> int:
    """Raw 0-20 affinity between two signs."""
    return COMPATIBILITY_MATRIX[Sign(sign1)][Sign(sign2)]


def get_compatibility_category(points: int) -> str:
    for minimum, label in COMPATIBILITY_CATEGORIES:
        if points >= minimum:
            return label
    return COMPATIBILITY_CATEGORIES[-1][1]


def get_sign_display_name(sign: Union[Sign, str]) -> str:
    return SIGN_DISPLAY[Sign(sign)][0]


def get_sign_symbol(sign: Union[Sign, str]) -> str:
    return SIGN_DISPLAY[Sign(sign)][1]


def get_sign_date_range(sign: Union[Sign, str]) -> str:
    return SIGN_DISPLAY[Sign(sign)][2]


def get_sign_info(sign: Union[Sign, str]) -> SignInfo:
    display_name, symbol, date_range = SIGN_DISPLAY[Sign(sign)]
    return SignInfo(sign=Sign(sign).value, display_name=display_name, symbol=symbol, date_range=date_range)
