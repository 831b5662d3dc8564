from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
from app.models import (
    UserProfile, Interest, LifestylePreferences, ValuesAndBeliefs,
    Dealbreakers, PartnerPreferences, UserAstrology
)


class ProfileIncompleteError(ValueError):
    """Raised when a profile lacks the fields scoring depends on."""


@dataclass
class MatchProfile:
    """Everything the filter and the scorer read about one user."""
    user_id: str
    username: str
    profile: Optional[UserProfile]
    interests: List[Interest] = field(default_factory=list)
    lifestyle: Optional[LifestylePreferences] = None
    values: Optional[ValuesAndBeliefs] = None
    dealbreakers: Optional[Dealbreakers] = None
    partner_prefs: Optional[PartnerPreferences] = None
    astrology: Optional[UserAstrology] = None

    @property
    def interest_names(self) -> List[str]:
        """Interest strings in declaration order, deduplicated."""
        return list(dict.fromkeys(i.interest for i in self.interests))

    @property
    def dealbreaker_tags(self) -> List[str]:
        """Tags from the Dealbreakers record. Partner-preference tags never filter."""
        if self.dealbreakers is None:
            return []
        return list(dict.fromkeys(self.dealbreakers.dealbreakers or []))

    @property
    def astrology_enabled(self) -> bool:
        return bool(self.astrology and self.astrology.enable_astrology_matching)

    @property
    def location(self) -> str:
        return self.profile.location if self.profile else ""

    @property
    def social_habits(self) -> dict:
        if self.lifestyle is None:
            return {}
        return self.lifestyle.social_habits or {}

    def require_complete(self) -> "MatchProfile":
        """Raise ProfileIncompleteError unless scoring preconditions hold."""
        if self.profile is None:
            raise ProfileIncompleteError(f"User {self.user_id} has no profile")
        if self.partner_prefs is None:
            raise ProfileIncompleteError(f"User {self.user_id} has no partner preferences")
        missing = [
            name for name in ("age", "gender", "orientation", "city", "state")
            if getattr(self.profile, name) is None
        ]
        if missing:
            raise ProfileIncompleteError(f"User {self.user_id} profile is missing: {', '.join(missing)}")
        return self
