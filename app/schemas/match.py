from datetime import datetime
from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional

class FactorScore(BaseModel):
    weight: float
    score: int = Field(..., ge=0, le=100)
    weighted: float

class CompatibilityResult(BaseModel):
    """Output of scoring one pair of profiles."""
    total_score: int = Field(..., ge=0, le=100)
    shared_interests_score: int
    age_compatibility_score: int
    location_proximity_score: int
    gender_orientation_score: int
    astrology_compatibility_score: Optional[int] = None  # None when astrology does not apply
    shared_interests: List[str] = Field(default_factory=list)
    weight_set: Literal["standard", "astrology"]
    weights: Dict[str, float]
    breakdown: Dict[str, FactorScore]

class CompatibilityDetailsResponse(BaseModel):
    shared_interests_score: int
    age_compatibility_score: int
    location_proximity_score: int
    gender_orientation_score: int
    astrology_compatibility_score: Optional[int] = None
    shared_interests: List[str]

    class Config:
        from_attributes = True

class MatchResponse(BaseModel):
    id: str
    user_id: str
    matched_user_id: str
    compatibility_score: int
    is_liked: bool
    is_passed: bool
    is_matched: bool
    created_at: Optional[datetime] = None
    details: Optional[CompatibilityDetailsResponse] = None

    class Config:
        from_attributes = True

class RevealResult(BaseModel):
    """Outcome of a photo reveal request. Rejections are results, not errors."""
    granted: bool
    reason: Optional[Literal["match_not_found", "photo_not_found", "below_threshold"]] = None
    reveal_id: Optional[str] = None
    compatibility_score: Optional[int] = None
