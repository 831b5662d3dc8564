"""
Dealbreaker filter.

Each tag a user declares maps to one predicate over the *candidate*. A pair
passes only if neither side trips any of the other side's tags. Tags with no
registered predicate never trip.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Callable, Mapping
from app.services.match_profile import MatchProfile
from app.utils.logger import get_logger

logger = get_logger(__name__)

DealbreakerCheck = Callable[[MatchProfile], bool]


def _smokes_frequently(candidate: MatchProfile) -> bool:
    return candidate.social_habits.get("smoking") == "frequently"


def _drinks_frequently(candidate: MatchProfile) -> bool:
    return candidate.social_habits.get("drinking") == "frequently"


def _wants_kids_soon(candidate: MatchProfile) -> bool:
    return candidate.values is not None and candidate.values.kids == "want-soon"


def _doesnt_want_kids(candidate: MatchProfile) -> bool:
    return candidate.values is not None and candidate.values.kids == "dont-want"


def _rejects_long_distance(candidate: MatchProfile) -> bool:
    return not (candidate.partner_prefs is not None and candidate.partner_prefs.long_distance)


DEALBREAKER_CHECKS: Mapping[str, DealbreakerCheck] = MappingProxyType({
    "smoking": _smokes_frequently,
    "heavy-drinking": _drinks_frequently,
    "wants-kids-soon": _wants_kids_soon,
    "doesnt-want-kids": _doesnt_want_kids,
    "long-distance": _rejects_long_distance,
})


def violates_dealbreaker(tag: str, candidate: MatchProfile) -> bool:
    """True if `candidate` trips `tag`. Unknown tags are never violated."""
    check = DEALBREAKER_CHECKS.get(tag)
    if check is None:
        logger.debug(f"Ignoring unrecognized dealbreaker tag '{tag}'")
        return False
    return check(candidate)


def _passes_one_way(owner: MatchProfile, candidate: MatchProfile) -> bool:
    for tag in owner.dealbreaker_tags:
        if violates_dealbreaker(tag, candidate):
            logger.debug(f"Candidate {candidate.user_id} trips dealbreaker '{tag}' of user {owner.user_id}")
            return False
    return True


def passes_dealbreakers(user1: MatchProfile, user2: MatchProfile) -> bool:
    """Check user1's tags against user2, then user2's tags against user1."""
    return _passes_one_way(user1, user2) and _passes_one_way(user2, user1)
