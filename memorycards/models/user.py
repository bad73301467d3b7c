from datetime import datetime, timezone

from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, InvalidHashError, VerificationError
from flask_login import UserMixin
from sqlalchemy.exc import IntegrityError

from memorycards.extensions import db
from memorycards.models.errors import DuplicateEmail, InvalidCredentials

_ph = PasswordHasher()

EMAIL_CONSTRAINT = "users_uc_email"

# Verified against when the email is unknown, so both failure paths cost the same
_dummy_hash = None


def _get_dummy_hash() -> str:
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = _ph.hash("memorycards-timing-equaliser")
    return _dummy_hash


def _is_duplicate_email(exc: IntegrityError) -> bool:
    # PostgreSQL reports the constraint name, SQLite the column
    message = str(exc.orig)
    return EMAIL_CONSTRAINT in message or "users.email" in message


class User(db.Model, UserMixin):
    __tablename__ = "users"
    __table_args__ = (db.UniqueConstraint("email", name=EMAIL_CONSTRAINT),)

    id              = db.Column(db.Integer, primary_key=True)
    name            = db.Column(db.String(255), nullable=False)
    email           = db.Column(db.String(255), nullable=False, index=True)
    hashed_password = db.Column(db.String(512), nullable=False)
    created         = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    # ── Password helpers ────────────────────────────────────────────────────
    def set_password(self, password: str) -> None:
        self.hashed_password = _ph.hash(password)

    def check_password(self, password: str) -> bool:
        try:
            return _ph.verify(self.hashed_password, password)
        except (VerifyMismatchError, InvalidHashError, VerificationError):
            return False

    # ── Queries ──────────────────────────────────────────────────────────────
    @classmethod
    def insert(cls, name: str, email: str, password: str) -> int:
        """Create a user.  Raises DuplicateEmail if the address is taken."""
        user = cls(name=name.strip(), email=email.strip().lower())
        user.set_password(password)
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            if _is_duplicate_email(exc):
                raise DuplicateEmail(email) from exc
            raise
        return user.id

    @classmethod
    def authenticate(cls, email: str, password: str) -> int:
        """Return the id of the user with these credentials.

        Raises InvalidCredentials for an unknown email and for a wrong
        password alike.
        """
        user = cls.query.filter_by(email=email.strip().lower()).first()
        if user is None:
            try:
                _ph.verify(_get_dummy_hash(), password)
            except VerifyMismatchError:
                pass
            raise InvalidCredentials()
        if not user.check_password(password):
            raise InvalidCredentials()
        return user.id

    @classmethod
    def exists(cls, user_id: int) -> bool:
        return bool(db.session.query(
            db.session.query(cls.id).filter_by(id=user_id).exists()
        ).scalar())

    def __repr__(self) -> str:
        return f"<User {self.email}>"
