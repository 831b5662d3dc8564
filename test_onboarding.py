"""
Tests for onboarding intake, persistence and match consumption.
"""
from datetime import date

import pytest
from pydantic import ValidationError

from app import crud
from app.models import UserAstrology, UserProfile, Interest
from app.schemas.match import MatchResponse
from app.services.candidate_finder import create_matches_for_user
from app.services.onboarding import finish_onboarding
from app.utils.dates import calculate_age
from conftest import TODAY, StubDistance, make_onboarding_data


def test_age_range_must_be_increasing():
    with pytest.raises(ValidationError):
        make_onboarding_data(age_min=30, age_max=30)
    with pytest.raises(ValidationError):
        make_onboarding_data(age_min=40, age_max=30)


def test_intake_rejects_out_of_range_values():
    with pytest.raises(ValidationError):
        make_onboarding_data(age_min=17)
    with pytest.raises(ValidationError):
        make_onboarding_data(gender="robot")
    with pytest.raises(ValidationError):
        make_onboarding_data(core_values=["a", "b", "c", "d", "e", "f"])
    with pytest.raises(ValidationError):
        make_onboarding_data(interests=[])


def test_duplicate_interests_are_collapsed():
    data = make_onboarding_data(interests=[
        {"category": "adventure", "interest": "hiking"},
        {"category": "health", "interest": "hiking"},
    ])
    assert [i.interest for i in data.interests] == ["hiking"]


@pytest.mark.parametrize("birthdate, expected", [
    (date(1995, 6, 1), 30),
    (date(1995, 6, 2), 29),
    (date(1995, 5, 31), 30),
])
def test_calculate_age(birthdate, expected):
    assert calculate_age(birthdate, TODAY) == expected


def test_complete_onboarding_persists_everything(db):
    user = crud.create_user(db, "bella")
    data = make_onboarding_data(
        name="Bella", birthdate=date(1996, 12, 25), gender="female", orientation="bisexual",
        enable_astrology_matching=True, dealbreakers=["smoking"],
    )
    profile = crud.complete_onboarding(db, user.id, data, today=TODAY)

    assert profile.age == 28
    astrology = db.query(UserAstrology).filter(UserAstrology.user_id == user.id).one()
    assert astrology.sun_sign == "capricorn"
    assert astrology.enable_astrology_matching is True
    assert db.query(Interest).filter(Interest.user_id == user.id).count() == 2
    stored = crud.get_user(db, user.id)
    assert stored.onboarding_completed is True
    assert stored.onboarding_at is not None


def test_onboarding_twice_is_refused(db, onboarded_user):
    user = onboarded_user("once")
    with pytest.raises(ValueError):
        crud.complete_onboarding(db, user.id, make_onboarding_data(), today=TODAY)
    assert db.query(UserProfile).filter(UserProfile.user_id == user.id).count() == 1


def test_create_user_with_explicit_id(db):
    user = crud.create_user(db, "fixed", user_id="user-123")
    assert crud.get_user(db, "user-123").username == "fixed"
    assert user.onboarding_completed is False
    assert user.onboarding_at is None


def test_onboarding_unknown_user(db):
    with pytest.raises(ValueError):
        crud.complete_onboarding(db, "ghost", make_onboarding_data(), today=TODAY)


def test_finish_onboarding_runs_candidate_search_once(db, onboarded_user):
    existing = onboarded_user("existing", gender="female")
    newcomer = crud.create_user(db, "newcomer")

    created = finish_onboarding(db, newcomer.id, make_onboarding_data(), distance_provider=StubDistance(), today=TODAY)
    assert [m.matched_user_id for m in created] == [existing.id]
    # The existing user is not rescanned
    assert crud.get_matched_user_ids(db, existing.id) == set()


def test_toggle_astrology_matching(db, onboarded_user):
    user = onboarded_user("stargazer")
    assert crud.set_astrology_matching(db, user.id, True).enable_astrology_matching is True
    assert crud.set_astrology_matching(db, "ghost", True) is None


def test_matches_ranked_by_score_and_passed_hidden(db, onboarded_user):
    viewer = onboarded_user("viewer", age=30)
    close = onboarded_user("close", gender="female", age=30)
    far = onboarded_user("far", gender="female", age=40)
    stranger = crud.create_user(db, "stranger")  # never onboarded

    create_matches_for_user(db, viewer.id, distance_provider=StubDistance())

    ranked = crud.get_matches_for_user(db, viewer.id)
    assert [m.matched_user_id for m in ranked] == [close.id, far.id]
    assert ranked[0].compatibility_score > ranked[1].compatibility_score

    crud.pass_match(db, viewer.id, ranked[0].id)
    assert [m.matched_user_id for m in crud.get_matches_for_user(db, viewer.id)] == [far.id]
    assert len(crud.get_matches_for_user(db, viewer.id, include_passed=True)) == 2
    assert stranger.id not in crud.get_matched_user_ids(db, viewer.id)

    response = MatchResponse.model_validate(ranked[1])
    assert response.details.age_compatibility_score == 50
    assert response.is_passed is False


def test_mutual_like_sets_matched_on_both_records(db, onboarded_user):
    alice = onboarded_user("alice", gender="female")
    bob = onboarded_user("bob")

    forward = create_matches_for_user(db, alice.id, distance_provider=StubDistance())[0]
    backward = create_matches_for_user(db, bob.id, distance_provider=StubDistance())[0]

    liked = crud.like_match(db, alice.id, forward.id)
    assert liked.is_liked is True
    assert liked.is_matched is False

    crud.like_match(db, bob.id, backward.id)
    assert crud.get_match(db, forward.id).is_matched is True
    assert crud.get_match(db, backward.id).is_matched is True


def test_like_and_pass_require_ownership(db, onboarded_user):
    viewer = onboarded_user("viewer")
    other = onboarded_user("other", gender="female")
    match = create_matches_for_user(db, viewer.id, distance_provider=StubDistance())[0]

    assert crud.like_match(db, other.id, match.id) is None
    assert crud.pass_match(db, other.id, match.id) is None
