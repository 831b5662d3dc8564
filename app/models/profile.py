from sqlalchemy import Column, String, DateTime, Date, Integer, Boolean, Text, JSON, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base
import uuid


class UserProfile(Base):
    """Core profile captured at onboarding. Never mutated by the scorer."""
    __tablename__ = "user_profiles"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    birthdate = Column(Date, nullable=False)
    age = Column(Integer, nullable=False, index=True)  # Derived from birthdate at onboarding
    gender = Column(String(20), nullable=False)  # male, female, non-binary, other
    orientation = Column(String(20), nullable=False)  # straight, gay, lesbian, bisexual, pansexual, asexual, other
    country = Column(String, nullable=False)
    state = Column(String, nullable=False)
    city = Column(String, nullable=False)
    bio = Column(Text, nullable=True)
    occupation = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="profile")

    @property
    def location(self) -> str:
        return f"{self.city}, {self.state}, {self.country}"

    def __repr__(self):
        return f"<UserProfile user_id={self.user_id} age={self.age} gender={self.gender} orientation={self.orientation}>"


class Interest(Base):
    __tablename__ = "interests"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category = Column(String, nullable=False)  # health, creative, intellectual, adventure, entertainment
    interest = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="interests")

    def __repr__(self):
        return f"<Interest user_id={self.user_id} {self.category}/{self.interest}>"


class LifestylePreferences(Base):
    __tablename__ = "lifestyle_preferences"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    exercise_types = Column(JSON, nullable=False, default=list)
    diet = Column(String(20), nullable=True)
    travel = Column(String(20), nullable=True)
    social_activities = Column(JSON, nullable=False, default=list)
    social_habits = Column(JSON, nullable=False, default=dict)  # {"drinking": "socially", "smoking": "never", ...}
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="lifestyle")


class ValuesAndBeliefs(Base):
    __tablename__ = "values_and_beliefs"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    core_values = Column(JSON, nullable=False, default=list)
    kids = Column(String(20), nullable=True)
    growth_goals = Column(JSON, nullable=False, default=list)
    intimacy_preferences = Column(Text, nullable=True)
    pet_preferences = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="values")


class Dealbreakers(Base):
    __tablename__ = "dealbreakers"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    dealbreakers = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="dealbreakers")


class PartnerPreferences(Base):
    __tablename__ = "partner_preferences"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    age_min = Column(Integer, nullable=False)
    age_max = Column(Integer, nullable=False)
    distance = Column(Integer, nullable=False)
    distance_unit = Column(String(10), nullable=False, default="miles")
    long_distance = Column(Boolean, nullable=False, default=False)
    meeting_timeline = Column(String(20), nullable=True)
    height_preference = Column(String(20), nullable=True)
    body_type_preference = Column(String(20), nullable=True)
    ethnicity_preferences = Column(JSON, nullable=False, default=list)
    dealbreakers = Column(JSON, nullable=False, default=list)  # Partner-specific dealbreakers
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="partner_preferences")

    def __repr__(self):
        return f"<PartnerPreferences user_id={self.user_id} age={self.age_min}-{self.age_max} long_distance={self.long_distance}>"


class UserAstrology(Base):
    """Sun sign computed once from the birthdate, plus the matching opt-in."""
    __tablename__ = "user_astrology"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    sun_sign = Column(String(20), nullable=False)
    enable_astrology_matching = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="astrology")

    def __repr__(self):
        return f"<UserAstrology user_id={self.user_id} sun_sign={self.sun_sign} enabled={self.enable_astrology_matching}>"
