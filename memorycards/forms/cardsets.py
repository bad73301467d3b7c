from wtforms import Form, StringField, IntegerField, TextAreaField, FieldList, FormField, SubmitField

from memorycards.forms.base import ValidatedForm
from memorycards.models.card_set import MIN_CARDS, MAX_CARDS
from memorycards.utils.validator import not_blank, max_chars, permitted_int_range

BLANK = "This field cannot be blank"


class CardSetCreateForm(ValidatedForm):
    title = StringField(
        "Title",
        render_kw={"placeholder": "e.g. European capitals", "maxlength": "100"},
    )
    cards_number = IntegerField(
        "Number of cards",
        render_kw={"min": str(MIN_CARDS), "max": str(MAX_CARDS)},
    )
    submit = SubmitField("Create Card Set")

    def check(self) -> None:
        v = self.validator
        v.check_field(not_blank(self.title.data), "title", BLANK)
        v.check_field(max_chars(self.title.data, 100), "title",
                      "This field cannot be more than 100 characters long")
        v.check_field(permitted_int_range(self.cards_number.data, MIN_CARDS, MAX_CARDS),
                      "cards_number",
                      f"This field must be in the range from {MIN_CARDS} to {MAX_CARDS}")


class CardEntryForm(Form):
    """One question/answer pair.  Plain Form: the outer form carries the CSRF token."""
    question = TextAreaField("Question", render_kw={"rows": 2})
    answer   = TextAreaField("Answer",   render_kw={"rows": 2})


class CardsCreateForm(ValidatedForm):
    # Replaced per request by cards_create_form() with the pending set's size
    cards = FieldList(FormField(CardEntryForm))
    submit = SubmitField("Save Cards")

    def check(self) -> None:
        for entry in self.cards:
            question, answer = entry.form.question, entry.form.answer
            self.validator.check_field(not_blank(question.data), question.name, BLANK)
            self.validator.check_field(not_blank(answer.data), answer.name, BLANK)

    def pairs(self) -> list[tuple[str, str]]:
        return [
            (entry.form.question.data.strip(), entry.form.answer.data.strip())
            for entry in self.cards
        ]


def cards_create_form(cards_number: int) -> CardsCreateForm:
    """Build the step-two form with exactly cards_number entries.

    Missing entries in the body decode as blank ones, extra entries are
    dropped, so the entry count never depends on the client.
    """
    class SizedCardsCreateForm(CardsCreateForm):
        cards = FieldList(
            FormField(CardEntryForm),
            min_entries=cards_number,
            max_entries=cards_number,
        )

    return SizedCardsCreateForm()
