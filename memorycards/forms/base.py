from flask import abort
from flask_wtf import FlaskForm

from memorycards.utils.validator import Validator


class ValidatedForm(FlaskForm):
    """FlaskForm whose rules are checked with a Validator.

    The WTForms fields only decode the request body.  Subclasses implement
    check(), which records messages on self.validator; templates read them
    back from form.validator.field_errors / non_field_errors.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.validator = Validator()

    def check(self) -> None:
        raise NotImplementedError

    def valid(self) -> bool:
        return self.validator.valid()

    def is_malformed(self) -> bool:
        """True if a non-empty submitted value could not be coerced to its field type."""
        for field in self:
            raw = getattr(field, "raw_data", None) or []
            if getattr(field, "process_errors", None) and any(str(v).strip() for v in raw):
                return True
        return False

    def checked_on_submit(self) -> bool:
        """Run check() on a submitted form and report whether it passed.

        A malformed body aborts the request with 400.
        """
        if not self.is_submitted():
            return False
        if self.is_malformed():
            abort(400)
        self.check()
        return self.valid()
