# Import all models so SQLAlchemy can discover them for db.create_all()
# CardSet before Card (FK dependency)
from memorycards.models.card_set import CardSet, MIN_CARDS, MAX_CARDS
from memorycards.models.card import Card
from memorycards.models.user import User
from memorycards.models.errors import (
    ModelError, RecordNotFound, DuplicateEmail, InvalidCredentials,
)

__all__ = [
    "CardSet", "MIN_CARDS", "MAX_CARDS",
    "Card",
    "User",
    "ModelError", "RecordNotFound", "DuplicateEmail", "InvalidCredentials",
]
