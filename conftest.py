"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database. Builders cover the two
ways the engine is exercised: transient MatchProfile objects for the pure
scoring functions, and fully onboarded users for the database-backed flows.
"""
import os

# Point settings at SQLite before anything under app/ is imported
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import crud
from app.database import Base
from app.init_db import init_db
from app.models import (
    UserProfile, Interest, LifestylePreferences, ValuesAndBeliefs,
    Dealbreakers, PartnerPreferences, UserAstrology
)
from app.schemas.profile import OnboardingData
from app.services.match_profile import MatchProfile

TODAY = date(2025, 6, 1)


def birthdate_for_age(age: int, month: int = 1, day: int = 15) -> date:
    """A birthdate that makes someone exactly `age` on TODAY."""
    return date(TODAY.year - age, month, day)


class StubDistance:
    """Deterministic distance: 0 for identical locations, else a lookup or default."""

    def __init__(self, default: float = 10.0, distances=None):
        self.default = default
        self.distances = {frozenset(pair): value for pair, value in (distances or {}).items()}
        self.calls = []

    def __call__(self, location1: str, location2: str) -> float:
        self.calls.append((location1, location2))
        if location1 == location2:
            return 0.0
        return self.distances.get(frozenset((location1, location2)), self.default)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def distance():
    return StubDistance()


@pytest.fixture
def build_profile():
    """Factory for transient MatchProfile objects (no database needed)."""

    def _build(
        user_id="user",
        age=30,
        gender="male",
        orientation="straight",
        interests=("hiking", "cooking"),
        city="Austin",
        state="Texas",
        country="United States",
        social_habits=None,
        kids=None,
        long_distance=False,
        dealbreakers=(),
        partner_dealbreakers=(),
        sun_sign=None,
        astrology_enabled=False,
        with_partner_prefs=True,
    ):
        astrology = None
        if sun_sign is not None:
            astrology = UserAstrology(user_id=user_id, sun_sign=sun_sign, enable_astrology_matching=astrology_enabled)
        partner_prefs = None
        if with_partner_prefs:
            partner_prefs = PartnerPreferences(
                user_id=user_id, age_min=18, age_max=65, distance=50,
                long_distance=long_distance, dealbreakers=list(partner_dealbreakers),
            )
        return MatchProfile(
            user_id=user_id,
            username=user_id,
            profile=UserProfile(
                user_id=user_id, name=user_id, age=age, gender=gender, orientation=orientation,
                city=city, state=state, country=country,
            ),
            interests=[Interest(user_id=user_id, category="general", interest=i) for i in interests],
            lifestyle=LifestylePreferences(user_id=user_id, social_habits=dict(social_habits or {})),
            values=ValuesAndBeliefs(user_id=user_id, kids=kids),
            dealbreakers=Dealbreakers(user_id=user_id, dealbreakers=list(dealbreakers)),
            partner_prefs=partner_prefs,
            astrology=astrology,
        )

    return _build


def make_onboarding_data(**overrides) -> OnboardingData:
    age = overrides.pop("age", 30)
    data = {
        "name": "Test User",
        "birthdate": birthdate_for_age(age),
        "gender": "male",
        "orientation": "straight",
        "country": "United States",
        "state": "Texas",
        "city": "Austin",
        "interests": [
            {"category": "adventure", "interest": "hiking"},
            {"category": "creative", "interest": "cooking"},
        ],
        "age_min": 18,
        "age_max": 65,
        "distance": 50,
    }
    data.update(overrides)
    return OnboardingData(**data)


@pytest.fixture
def onboarded_user(db):
    """Factory: create a user and complete onboarding without running the finder."""
    counter = {"n": 0}

    def _create(username=None, **overrides):
        counter["n"] += 1
        user = crud.create_user(db, username or f"user{counter['n']}")
        crud.complete_onboarding(db, user.id, make_onboarding_data(**overrides), today=TODAY)
        return user

    return _create
