from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from app.schemas.match import CompatibilityResult, FactorScore
from app.services.astrology import get_astrology_compatibility
from app.services.compatibility_constants import MAX_SIGN_POINTS
from app.services.location import DistanceProvider, get_default_distance_provider
from app.services.match_profile import MatchProfile
from app.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WeightSet:
    """One named weighting of the sub-scores. Weights sum to 1.0."""
    name: str
    interests: float
    age: float
    location: float
    gender_orientation: float
    astrology: Optional[float] = None

    def active(self) -> Dict[str, float]:
        weights = {
            "interests": self.interests,
            "age": self.age,
            "location": self.location,
            "gender_orientation": self.gender_orientation,
        }
        if self.astrology is not None:
            weights["astrology"] = self.astrology
        return weights


STANDARD_WEIGHTS = WeightSet(
    name="standard", interests=0.30, age=0.20, location=0.20, gender_orientation=0.30
)
ASTROLOGY_WEIGHTS = WeightSet(
    name="astrology", interests=0.25, age=0.15, location=0.15, gender_orientation=0.25, astrology=0.20
)

AGE_PENALTY_PER_YEAR = 5
DISTANCE_PENALTY_PER_UNIT = 2

# (gender, orientation) combinations that are fully compatible with each other.
# A set with a single member means both people share that combination.
_MUTUAL_PAIRS = frozenset({
    frozenset({("male", "straight"), ("female", "straight")}),
    frozenset({("male", "gay")}),
    frozenset({("female", "lesbian")}),
})
_FLUID_ORIENTATIONS = frozenset({"bisexual", "pansexual"})


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def astrology_applies(user1: MatchProfile, user2: MatchProfile) -> bool:
    return user1.astrology_enabled and user2.astrology_enabled


def select_weights(use_astrology: bool) -> WeightSet:
    return ASTROLOGY_WEIGHTS if use_astrology else STANDARD_WEIGHTS


def shared_interests_score(user1: MatchProfile, user2: MatchProfile) -> Tuple[int, List[str]]:
    """Percentage of the larger interest set that both users share."""
    interests1 = user1.interest_names
    interests2 = set(user2.interest_names)
    shared = [interest for interest in interests1 if interest in interests2]
    denominator = max(len(interests1), len(interests2))
    if denominator == 0:
        return 0, shared
    return round_half_up(len(shared) / denominator * 100), shared


def age_compatibility_score(age1: int, age2: int) -> int:
    return max(0, 100 - AGE_PENALTY_PER_YEAR * abs(age1 - age2))


def location_proximity_score(distance: float) -> int:
    return max(0, round_half_up(100 - DISTANCE_PENALTY_PER_UNIT * max(0.0, distance)))


def gender_orientation_score(user1: MatchProfile, user2: MatchProfile) -> int:
    """
    Coarse compatibility of gender/orientation combinations.

    Non-binary gender and "asexual"/"other" orientations only score through
    the bisexual/pansexual rule; every other pairing is 0.
    """
    p1, p2 = user1.profile, user2.profile
    if frozenset({(p1.gender, p1.orientation), (p2.gender, p2.orientation)}) in _MUTUAL_PAIRS:
        return 100
    if p1.orientation in _FLUID_ORIENTATIONS or p2.orientation in _FLUID_ORIENTATIONS:
        return 80
    return 0


def astrology_compatibility_score(user1: MatchProfile, user2: MatchProfile) -> int:
    points = get_astrology_compatibility(user1.astrology.sun_sign, user2.astrology.sun_sign)
    return round_half_up(points / MAX_SIGN_POINTS * 100)


def calculate_compatibility(
    user1: MatchProfile,
    user2: MatchProfile,
    distance_provider: Optional[DistanceProvider] = None,
) -> CompatibilityResult:
    """
    Score a pair of complete profiles.

    The result is symmetric in its arguments as long as the distance
    provider is.

    Raises:
        ProfileIncompleteError: If either profile lacks scoring inputs
    """
    user1.require_complete()
    user2.require_complete()
    distance_provider = distance_provider or get_default_distance_provider()
    use_astrology = astrology_applies(user1, user2)
    weight_set = select_weights(use_astrology)

    interests_score, shared = shared_interests_score(user1, user2)
    scores: Dict[str, int] = {
        "interests": interests_score,
        "age": age_compatibility_score(user1.profile.age, user2.profile.age),
        "location": location_proximity_score(distance_provider(user1.location, user2.location)),
        "gender_orientation": gender_orientation_score(user1, user2),
    }
    astrology_score = None
    if use_astrology:
        astrology_score = astrology_compatibility_score(user1, user2)
        scores["astrology"] = astrology_score

    weights = weight_set.active()
    breakdown = {
        factor: FactorScore(weight=weight, score=scores[factor], weighted=scores[factor] * weight)
        for factor, weight in weights.items()
    }
    total = round_half_up(sum(factor.weighted for factor in breakdown.values()))
    total = min(100, max(0, total))

    logger.debug(
        f"Scored {user1.user_id} vs {user2.user_id}: total={total} weights={weight_set.name} "
        f"scores={scores}"
    )

    return CompatibilityResult(
        total_score=total,
        shared_interests_score=scores["interests"],
        age_compatibility_score=scores["age"],
        location_proximity_score=scores["location"],
        gender_orientation_score=scores["gender_orientation"],
        astrology_compatibility_score=astrology_score,
        shared_interests=shared,
        weight_set=weight_set.name,
        weights=weights,
        breakdown=breakdown,
    )
