from datetime import datetime, timezone

from sqlalchemy import func
from sqlalchemy.orm import selectinload

from memorycards.extensions import db
from memorycards.models.errors import RecordNotFound

MIN_CARDS = 3
MAX_CARDS = 10


class CardSet(db.Model):
    """A titled set of flashcards.

    cards_number is the size declared when the set was created.  The second
    creation step uses it to decide how many cards to ask for; storage itself
    does not enforce it.
    """
    __tablename__ = "card_sets"

    id           = db.Column(db.Integer, primary_key=True)
    title        = db.Column(db.String(100), nullable=False)
    cards_number = db.Column(db.Integer, nullable=False)
    created      = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    cards = db.relationship(
        "Card", back_populates="card_set", order_by="Card.id",
        lazy="select", cascade="all, delete-orphan", passive_deletes=True,
    )

    # ── Queries ──────────────────────────────────────────────────────────────
    @classmethod
    def insert(cls, title: str, cards_number: int) -> int:
        card_set = cls(title=title, cards_number=cards_number)
        db.session.add(card_set)
        db.session.commit()
        return card_set.id

    @classmethod
    def get(cls, card_set_id: int) -> "CardSet":
        """Return the set with its cards loaded, or raise RecordNotFound."""
        card_set = (
            cls.query
            .options(selectinload(cls.cards))
            .filter_by(id=card_set_id)
            .first()
        )
        if card_set is None:
            raise RecordNotFound(f"card set {card_set_id}")
        return card_set

    @classmethod
    def list_all(cls) -> list["CardSet"]:
        """All sets, newest first.  Cards are not loaded."""
        return cls.query.order_by(cls.id.desc()).all()

    # ── Computed properties ──────────────────────────────────────────────────
    @property
    def card_count(self) -> int:
        from memorycards.models.card import Card
        return (
            db.session.query(func.count(Card.id))
            .filter(Card.card_set_id == self.id)
            .scalar()
        ) or 0

    def __repr__(self) -> str:
        return f"<CardSet {self.title!r} ({self.cards_number} cards)>"
