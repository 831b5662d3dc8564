"""
Compatibility Constants - Shared Data

Static lookup tables used by the sign calculator, the scorer and the photo
reveal gate. Everything here is built once at import and exposed read-only.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class Sign(str, Enum):
    ARIES = "aries"
    TAURUS = "taurus"
    GEMINI = "gemini"
    CANCER = "cancer"
    LEO = "leo"
    VIRGO = "virgo"
    LIBRA = "libra"
    SCORPIO = "scorpio"
    SAGITTARIUS = "sagittarius"
    CAPRICORN = "capricorn"
    AQUARIUS = "aquarius"
    PISCES = "pisces"


# (month, day) boundaries, inclusive on both ends. Capricorn wraps the year
# end and is checked before the others.
CAPRICORN_START: Tuple[int, int] = (12, 22)
CAPRICORN_END: Tuple[int, int] = (1, 19)

SIGN_DATES: Tuple[Tuple[Sign, Tuple[int, int], Tuple[int, int]], ...] = (
    (Sign.AQUARIUS, (1, 20), (2, 18)),
    (Sign.PISCES, (2, 19), (3, 20)),
    (Sign.ARIES, (3, 21), (4, 19)),
    (Sign.TAURUS, (4, 20), (5, 20)),
    (Sign.GEMINI, (5, 21), (6, 20)),
    (Sign.CANCER, (6, 21), (7, 22)),
    (Sign.LEO, (7, 23), (8, 22)),
    (Sign.VIRGO, (8, 23), (9, 22)),
    (Sign.LIBRA, (9, 23), (10, 22)),
    (Sign.SCORPIO, (10, 23), (11, 21)),
    (Sign.SAGITTARIUS, (11, 22), (12, 21)),
)

# Returned for a date no range covers; unreachable for real calendar dates.
FALLBACK_SIGN = Sign.ARIES

SIGN_DISPLAY: Mapping[Sign, Tuple[str, str, str]] = MappingProxyType({
    Sign.ARIES: ("Aries", "♈", "Mar 21 - Apr 19"),
    Sign.TAURUS: ("Taurus", "♉", "Apr 20 - May 20"),
    Sign.GEMINI: ("Gemini", "♊", "May 21 - Jun 20"),
    Sign.CANCER: ("Cancer", "♋", "Jun 21 - Jul 22"),
    Sign.LEO: ("Leo", "♌", "Jul 23 - Aug 22"),
    Sign.VIRGO: ("Virgo", "♍", "Aug 23 - Sep 22"),
    Sign.LIBRA: ("Libra", "♎", "Sep 23 - Oct 22"),
    Sign.SCORPIO: ("Scorpio", "♏", "Oct 23 - Nov 21"),
    Sign.SAGITTARIUS: ("Sagittarius", "♐", "Nov 22 - Dec 21"),
    Sign.CAPRICORN: ("Capricorn", "♑", "Dec 22 - Jan 19"),
    Sign.AQUARIUS: ("Aquarius", "♒", "Jan 20 - Feb 18"),
    Sign.PISCES: ("Pisces", "♓", "Feb 19 - Mar 20"),
})

MAX_SIGN_POINTS = 20

_ORDER = (
    Sign.ARIES, Sign.TAURUS, Sign.GEMINI, Sign.CANCER, Sign.LEO, Sign.VIRGO,
    Sign.LIBRA, Sign.SCORPIO, Sign.SAGITTARIUS, Sign.CAPRICORN, Sign.AQUARIUS, Sign.PISCES,
)

# Pairwise sign affinity, 0-20. Rows follow _ORDER.
_MATRIX_ROWS = (
    (18, 10, 15, 8, 20, 12, 15, 12, 20, 10, 18, 12),   # aries
    (10, 18, 8, 15, 12, 20, 12, 15, 8, 20, 10, 18),    # taurus
    (15, 8, 18, 10, 15, 12, 20, 8, 15, 12, 20, 10),    # gemini
    (8, 15, 10, 18, 12, 15, 10, 20, 8, 15, 12, 20),    # cancer
    (20, 12, 15, 12, 18, 10, 15, 8, 20, 8, 15, 12),    # leo
    (12, 20, 12, 15, 10, 18, 8, 15, 10, 20, 8, 15),    # virgo
    (15, 12, 20, 10, 15, 8, 18, 12, 15, 8, 20, 10),    # libra
    (12, 15, 8, 20, 8, 15, 12, 18, 10, 15, 10, 20),    # scorpio
    (20, 8, 15, 8, 20, 10, 15, 10, 18, 12, 15, 8),     # sagittarius
    (10, 20, 12, 15, 8, 20, 8, 15, 12, 18, 10, 15),    # capricorn
    (18, 10, 20, 12, 15, 8, 20, 10, 15, 10, 18, 12),   # aquarius
    (12, 18, 10, 20, 12, 15, 10, 20, 8, 15, 12, 18),   # pisces
)

COMPATIBILITY_MATRIX: Mapping[Sign, Mapping[Sign, int]] = MappingProxyType({
    row_sign: MappingProxyType(dict(zip(_ORDER, row)))
    for row_sign, row in zip(_ORDER, _MATRIX_ROWS)
})

# Minimum points for each descriptive category, highest first
COMPATIBILITY_CATEGORIES: Tuple[Tuple[int, str], ...] = (
    (18, "Excellent"),
    (15, "Good"),
    (12, "Moderate"),
    (8, "Challenging"),
    (0, "Difficult"),
)

# Aggregate score a match needs before a photo may be revealed
PHOTO_REVEAL_THRESHOLD = 68
