"""
Tests for the CardSet, Card and User models against in-memory SQLite.
"""
import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as OrmSession

from memorycards.extensions import db
from memorycards.models import (
    CardSet, Card, User, RecordNotFound, DuplicateEmail, InvalidCredentials,
)


# ── CardSet ───────────────────────────────────────────────────────────────────

class TestCardSet:

    def test_insert_returns_id(self, ctx):
        card_set_id = CardSet.insert("Capitals", 3)
        assert isinstance(card_set_id, int)
        assert card_set_id > 0

    def test_get_with_cards(self, ctx):
        card_set_id = CardSet.insert("Capitals", 3)
        pairs = [("France?", "Paris"), ("Spain?", "Madrid"), ("Italy?", "Rome")]
        for question, answer in pairs:
            Card.insert(card_set_id, question, answer)

        card_set = CardSet.get(card_set_id)
        assert card_set.title == "Capitals"
        assert card_set.cards_number == 3
        assert [(c.question, c.answer) for c in card_set.cards] == pairs
        assert card_set.created is not None

    def test_get_orders_cards_by_id(self, ctx):
        card_set_id = CardSet.insert("Order", 3)
        ids = [Card.insert(card_set_id, f"q{i}", f"a{i}") for i in range(3)]
        assert [c.id for c in CardSet.get(card_set_id).cards] == sorted(ids)

    def test_get_without_cards(self, ctx):
        card_set_id = CardSet.insert("Empty", 5)
        card_set = CardSet.get(card_set_id)
        assert card_set.cards == []
        assert card_set.card_count == 0

    def test_get_missing_raises(self, ctx):
        with pytest.raises(RecordNotFound):
            CardSet.get(999)

    def test_list_all_newest_first(self, ctx):
        first = CardSet.insert("First", 3)
        second = CardSet.insert("Second", 4)
        third = CardSet.insert("Third", 5)
        assert [s.id for s in CardSet.list_all()] == [third, second, first]

    def test_list_all_empty(self, ctx):
        assert CardSet.list_all() == []

    def test_card_count(self, ctx):
        card_set_id = CardSet.insert("Count", 3)
        Card.insert(card_set_id, "q", "a")
        assert CardSet.get(card_set_id).card_count == 1


# ── Card ──────────────────────────────────────────────────────────────────────

class TestCard:

    def test_insert_into_missing_set_fails(self, ctx):
        with pytest.raises(IntegrityError):
            Card.insert(12345, "q", "a")
        assert Card.query.count() == 0

    def test_insert_many(self, ctx):
        card_set_id = CardSet.insert("Batch", 3)
        ids = Card.insert_many(card_set_id, [("q1", "a1"), ("q2", "a2"), ("q3", "a3")])
        assert len(ids) == 3
        assert CardSet.get(card_set_id).card_count == 3

    def test_insert_many_is_atomic(self, ctx):
        card_set_id = CardSet.insert("Atomic", 3)
        # NULL answer violates NOT NULL on the last row
        with pytest.raises(IntegrityError):
            Card.insert_many(card_set_id, [("q1", "a1"), ("q2", "a2"), ("q3", None)])
        assert Card.query.filter_by(card_set_id=card_set_id).count() == 0

    def test_deleting_set_deletes_cards(self, ctx):
        card_set_id = CardSet.insert("Gone", 3)
        Card.insert(card_set_id, "q", "a")
        db.session.delete(db.session.get(CardSet, card_set_id))
        db.session.commit()
        assert Card.query.count() == 0


# ── User ──────────────────────────────────────────────────────────────────────

class TestUser:

    def test_insert_and_authenticate(self, ctx):
        user_id = User.insert("A", "a@x.com", "password1")
        assert User.authenticate("a@x.com", "password1") == user_id

    def test_wrong_password(self, ctx):
        User.insert("A", "a@x.com", "password1")
        with pytest.raises(InvalidCredentials):
            User.authenticate("a@x.com", "wrong")

    def test_unknown_email(self, ctx):
        with pytest.raises(InvalidCredentials):
            User.authenticate("nobody@x.com", "password1")

    def test_duplicate_email(self, ctx):
        User.insert("A", "a@x.com", "password1")
        with pytest.raises(DuplicateEmail):
            User.insert("B", "a@x.com", "password2")
        assert User.query.count() == 1

    def test_other_integrity_errors_propagate(self, ctx, monkeypatch):
        def broken_commit(self):
            raise IntegrityError(
                "INSERT INTO users", {}, Exception("NOT NULL constraint failed: users.name")
            )

        monkeypatch.setattr(OrmSession, "commit", broken_commit)
        with pytest.raises(IntegrityError) as excinfo:
            User.insert("A", "a@x.com", "password1")
        assert not isinstance(excinfo.value, DuplicateEmail)

    def test_email_is_normalised(self, ctx):
        user_id = User.insert("A", "  A@X.com ", "password1")
        assert db.session.get(User, user_id).email == "a@x.com"
        assert User.authenticate("a@X.COM", "password1") == user_id
        with pytest.raises(DuplicateEmail):
            User.insert("B", "a@x.com", "password2")

    def test_password_is_not_stored_in_plaintext(self, ctx):
        user_id = User.insert("A", "a@x.com", "password1")
        user = db.session.get(User, user_id)
        assert user.hashed_password != "password1"
        assert "password1" not in user.hashed_password
        assert user.hashed_password.startswith("$argon2")

    def test_check_password(self, ctx):
        user = User(name="A", email="a@x.com")
        user.set_password("password1")
        assert user.check_password("password1") is True
        assert user.check_password("password2") is False

    def test_check_password_with_corrupt_hash(self, ctx):
        user = User(name="A", email="a@x.com", hashed_password="not-a-hash")
        assert user.check_password("password1") is False

    def test_exists(self, ctx):
        user_id = User.insert("A", "a@x.com", "password1")
        assert User.exists(user_id) is True
        assert User.exists(user_id + 1) is False
