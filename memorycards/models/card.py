from sqlalchemy.exc import SQLAlchemyError

from memorycards.extensions import db


class Card(db.Model):
    __tablename__ = "cards"

    id          = db.Column(db.Integer, primary_key=True)
    card_set_id = db.Column(
        db.Integer, db.ForeignKey("card_sets.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    question    = db.Column(db.Text, nullable=False)
    answer      = db.Column(db.Text, nullable=False)

    card_set = db.relationship("CardSet", back_populates="cards")

    @classmethod
    def insert(cls, card_set_id: int, question: str, answer: str) -> int:
        """Append one card.  A missing parent set fails on the foreign key."""
        return cls.insert_many(card_set_id, [(question, answer)])[0]

    @classmethod
    def insert_many(cls, card_set_id: int, pairs) -> list[int]:
        """Insert (question, answer) pairs as a single transaction.

        Either every card is stored or none is; the error is re-raised after
        the rollback.
        """
        cards = [cls(card_set_id=card_set_id, question=q, answer=a) for q, a in pairs]
        try:
            db.session.add_all(cards)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return [c.id for c in cards]

    def __repr__(self) -> str:
        return f"<Card {self.id} (set={self.card_set_id})>"
