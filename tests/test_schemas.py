from datetime import datetime

from dating_app.app.schemas import Message, Profile, User


def _user(user_id: int, name: str = "Alice") -> User:
    return User(id=user_id, name=name, email=f"{name.lower()}@example.com", password="secret")


def _profile(user_id: int, *interests: str) -> Profile:
    profile = Profile(user=_user(user_id), age=30, bio="")
    for interest in interests:
        profile.add_interest(interest)
    return profile


def test_verify_password_uses_plain_equality():
    user = _user(1)
    assert user.verify_password("secret")
    assert not user.verify_password("Secret")
    assert not user.verify_password("")


def test_password_hidden_from_repr_and_dump():
    user = _user(1)
    assert "secret" not in repr(user)
    assert "password" not in user.model_dump()


def test_profile_keeps_user_reference():
    user = _user(1)
    profile = Profile(user=user, age=28, bio="I love hiking.")
    assert profile.user is user
    assert profile.interests == []


def test_interests_keep_order_and_duplicates():
    profile = _profile(1, "hiking", "travel", "hiking")
    assert profile.get_interests() == ["hiking", "travel", "hiking"]


def test_get_interests_returns_copy():
    profile = _profile(1, "hiking")
    interests = profile.get_interests()
    interests.append("music")
    assert profile.get_interests() == ["hiking"]


def test_match_counts_shared_interests():
    alice = _profile(1, "hiking", "reading", "travel")
    bob = _profile(2, "music", "travel", "food")
    assert alice.match(bob) == 1


def test_match_is_symmetric_with_duplicates():
    a = _profile(1, "travel", "travel", "food")
    b = _profile(2, "travel", "music")
    assert a.match(b) == b.match(a) == 1


def test_match_with_no_interests_is_zero():
    assert _profile(1).match(_profile(2, "travel")) == 0


def test_match_is_case_sensitive():
    assert _profile(1, "Travel").match(_profile(2, "travel")) == 0


def test_message_defaults_timestamp_and_renders():
    sender, recipient = _user(1, "Alice"), _user(2, "Bob")
    before = datetime.now()
    message = Message(sender=sender, recipient=recipient, content="Hi Bob")
    assert before <= message.timestamp <= datetime.now()
    assert message.sender is sender
    assert message.recipient is recipient

    fixed = Message(
        sender=sender,
        recipient=recipient,
        content="Hi Bob",
        timestamp=datetime(2024, 2, 14, 19, 30, 0),
    )
    assert str(fixed) == "From: Alice, To: Bob, Content: Hi Bob, Time: 2024-02-14 19:30:00"
