"""
Exceptions raised by the model layer.

Views translate these into responses; anything else coming out of a model
(SQLAlchemyError and friends) is a server error.
"""


class ModelError(Exception):
    """Base class for model-level failures the caller is expected to handle."""


class RecordNotFound(ModelError):
    """No row matched the requested id."""


class DuplicateEmail(ModelError):
    """The unique constraint on users.email was violated."""


class InvalidCredentials(ModelError):
    """Unknown email or wrong password.  The two cases are deliberately identical."""
