from dating_app.app.schemas import Profile, User
from dating_app.app.services.match_service import MatchService


def _profile(user_id: int, *interests: str) -> Profile:
    user = User(id=user_id, name=f"user{user_id}", email=f"u{user_id}@example.com", password="pw")
    return Profile(user=user, age=25, bio="", interests=list(interests))


def test_excludes_profile_itself():
    me = _profile(1, "travel")
    assert MatchService.find_matches(me, [me], 0) == []


def test_excludes_other_profiles_of_same_user():
    me = _profile(1, "travel")
    twin = _profile(1, "travel")
    assert MatchService.find_matches(me, [twin], 1) == []


def test_threshold_is_inclusive():
    me = _profile(1, "travel", "food")
    one = _profile(2, "travel")
    two = _profile(3, "food", "travel")
    assert MatchService.find_matches(me, [one, two], 1) == [one, two]
    assert MatchService.find_matches(me, [one, two], 2) == [two]
    assert MatchService.find_matches(me, [one, two], 3) == []


def test_zero_threshold_keeps_every_other_profile():
    me = _profile(1, "travel")
    others = [_profile(2), _profile(3, "music")]
    assert MatchService.find_matches(me, [me] + others, 0) == others


def test_preserves_input_order_not_score():
    me = _profile(1, "a", "b", "c")
    low = _profile(2, "a")
    high = _profile(3, "a", "b", "c")
    assert MatchService.find_matches(me, [low, high], 1) == [low, high]


def test_score_matches_reports_scores():
    me = _profile(1, "hiking", "reading", "travel")
    bob = _profile(2, "music", "travel", "food")
    charlie = _profile(3, "food", "movies", "reading")
    dave = _profile(4, "chess")
    assert MatchService.score_matches(me, [bob, charlie, dave], 1) == [(bob, 1), (charlie, 1)]
