from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Literal, Optional
from datetime import date

Gender = Literal["male", "female", "non-binary", "other"]
Orientation = Literal["straight", "gay", "lesbian", "bisexual", "pansexual", "asexual", "other"]
Diet = Literal["vegetarian", "vegan", "halal", "kosher", "keto", "no-restrictions"]
Travel = Literal["frequent", "occasional", "homebody", "nomad"]
Kids = Literal["want-soon", "eventually", "maybe", "dont-want", "already-have", "open-to-partner"]
MeetingTimeline = Literal["1-2-weeks", "1-month", "2-3-months", "when-ready"]
HeightPreference = Literal["shorter", "similar", "taller", "no-preference"]
BodyType = Literal["slim", "athletic", "average", "curvy", "plus-size", "no-preference"]


class InterestIn(BaseModel):
    category: str  # informational only
    interest: str


class SocialHabits(BaseModel):
    """Self-reported frequencies, e.g. 'never', 'socially', 'frequently'."""
    drinking: Optional[str] = None
    smoking: Optional[str] = None
    cannabis: Optional[str] = None
    vaping: Optional[str] = None


class OnboardingData(BaseModel):
    """Everything the onboarding wizard collects, validated at intake."""
    # Basic info
    name: str = Field(..., min_length=1)
    birthdate: date
    gender: Gender
    orientation: Orientation
    country: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    bio: Optional[str] = None
    occupation: Optional[str] = None

    # Interests
    interests: List[InterestIn] = Field(..., min_length=1)

    # Lifestyle
    exercise_types: List[str] = Field(default_factory=list)
    diet: Optional[Diet] = None
    travel: Optional[Travel] = None
    social_activities: List[str] = Field(default_factory=list)
    social_habits: SocialHabits = Field(default_factory=SocialHabits)

    # Values
    core_values: List[str] = Field(default_factory=list, max_length=5)
    kids: Optional[Kids] = None
    growth_goals: List[str] = Field(default_factory=list)
    intimacy_preferences: Optional[str] = None
    pet_preferences: List[str] = Field(default_factory=list)

    # Dealbreakers
    dealbreakers: List[str] = Field(default_factory=list)

    # Partner preferences
    age_min: int = Field(..., ge=18, le=65)
    age_max: int = Field(..., ge=18, le=65)
    distance: int = Field(..., ge=1, le=100)
    distance_unit: Literal["miles", "km"] = "miles"
    long_distance: bool = False
    meeting_timeline: Optional[MeetingTimeline] = None
    height_preference: Optional[HeightPreference] = None
    body_type_preference: Optional[BodyType] = None
    ethnicity_preferences: List[str] = Field(default_factory=list)
    partner_dealbreakers: List[str] = Field(default_factory=list)

    # Astrology
    enable_astrology_matching: bool = False

    @field_validator('interests')
    @classmethod
    def dedupe_interests(cls, v: List[InterestIn]) -> List[InterestIn]:
        seen = set()
        unique = []
        for item in v:
            if item.interest not in seen:
                seen.add(item.interest)
                unique.append(item)
        return unique

    @model_validator(mode='after')
    def validate_age_range(self):
        if self.age_min >= self.age_max:
            raise ValueError('age_min must be less than age_max')
        return self


class SignInfo(BaseModel):
    sign: str
    display_name: str
    symbol: str
    date_range: str

