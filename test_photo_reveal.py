"""
Tests for the photo reveal gate.
"""
import pytest

from app import crud
from app.models import Match, PhotoReveal
from app.services.photo_reveal import (
    can_reveal_photo,
    is_photo_revealed,
    meets_reveal_threshold,
    request_reveal,
)


@pytest.fixture
def pair(db, onboarded_user):
    viewer = onboarded_user("viewer")
    candidate = onboarded_user("candidate", gender="female")
    return viewer, candidate


def _match(db, viewer, candidate, score):
    match = Match(user_id=viewer.id, matched_user_id=candidate.id, compatibility_score=score)
    db.add(match)
    db.commit()
    return match


def _photo(db, user, order_index=1):
    return crud.create_photo(db, user.id, f"p{order_index}.jpg", f"https://cdn.example/p{order_index}.jpg", order_index)


@pytest.mark.parametrize("score, expected", [(0, False), (67, False), (68, True), (100, True)])
def test_threshold_is_inclusive(score, expected):
    assert meets_reveal_threshold(score) is expected


def test_can_reveal_photo_reads_stored_score(db, pair):
    viewer, candidate = pair
    assert can_reveal_photo(db, _match(db, viewer, candidate, 67).id) is False
    db.query(Match).delete()
    db.commit()
    assert can_reveal_photo(db, _match(db, viewer, candidate, 68).id) is True
    assert can_reveal_photo(db, "missing") is False


def test_below_threshold_is_rejected_without_grant(db, pair):
    viewer, candidate = pair
    match = _match(db, viewer, candidate, 67)
    photo = _photo(db, viewer)

    result = request_reveal(db, viewer.id, match.id, photo.id)
    assert result.granted is False
    assert result.reason == "below_threshold"
    assert result.compatibility_score == 67
    assert db.query(PhotoReveal).count() == 0
    assert is_photo_revealed(db, photo.id, candidate.id) is False


def test_grant_is_one_directional_and_per_photo(db, pair):
    viewer, candidate = pair
    match = _match(db, viewer, candidate, 68)
    photo = _photo(db, viewer, 1)
    other_photo = _photo(db, viewer, 2)

    result = request_reveal(db, viewer.id, match.id, photo.id)
    assert result.granted is True
    assert result.reveal_id is not None

    reveal = db.query(PhotoReveal).one()
    assert reveal.revealed_by_user_id == viewer.id
    assert reveal.revealed_to_user_id == candidate.id
    assert reveal.match_id == match.id

    assert is_photo_revealed(db, photo.id, candidate.id) is True
    assert is_photo_revealed(db, other_photo.id, candidate.id) is False
    assert is_photo_revealed(db, photo.id, viewer.id) is False


def test_repeat_request_keeps_visibility(db, pair):
    viewer, candidate = pair
    match = _match(db, viewer, candidate, 90)
    photo = _photo(db, viewer)

    assert request_reveal(db, viewer.id, match.id, photo.id).granted
    assert request_reveal(db, viewer.id, match.id, photo.id).granted
    assert is_photo_revealed(db, photo.id, candidate.id) is True


def test_unknown_or_foreign_match_is_rejected(db, pair):
    viewer, candidate = pair
    match = _match(db, viewer, candidate, 95)
    photo = _photo(db, candidate)

    assert request_reveal(db, viewer.id, "missing", photo.id).reason == "match_not_found"
    # The candidate cannot use the viewer's directed match record
    assert request_reveal(db, candidate.id, match.id, photo.id).reason == "match_not_found"


def test_photo_must_be_the_viewers_and_active(db, pair):
    viewer, candidate = pair
    match = _match(db, viewer, candidate, 95)
    foreign = _photo(db, candidate)
    own = _photo(db, viewer)
    crud.deactivate_photo(db, own.id, viewer.id)

    assert request_reveal(db, viewer.id, match.id, foreign.id).reason == "photo_not_found"
    assert request_reveal(db, viewer.id, match.id, own.id).reason == "photo_not_found"
    assert request_reveal(db, viewer.id, match.id, "missing").reason == "photo_not_found"
    assert crud.get_user_photos(db, viewer.id) == []
