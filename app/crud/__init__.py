from app.crud.user import (
    get_user,
    create_user,
)
from app.crud.onboarding import (
    complete_onboarding,
    set_astrology_matching,
)
from app.crud.match import (
    create_match,
    get_match,
    get_matched_user_ids,
    get_matches_for_user,
    like_match,
    pass_match,
)
from app.crud.photo import (
    create_photo,
    get_photo,
    get_user_photos,
    deactivate_photo,
    create_photo_reveal,
    has_photo_reveal,
)

__all__ = [
    # User operations
    "get_user",
    "create_user",

    # Onboarding operations
    "complete_onboarding",
    "set_astrology_matching",

    # Match operations
    "create_match",
    "get_match",
    "get_matched_user_ids",
    "get_matches_for_user",
    "like_match",
    "pass_match",

    # Photo operations
    "create_photo",
    "get_photo",
    "get_user_photos",
    "deactivate_photo",
    "create_photo_reveal",
    "has_photo_reveal",
]
