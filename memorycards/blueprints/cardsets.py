"""
Card set creation, in two steps.

Step one stores an empty set (title + declared number of cards) and parks it
in the session as "pending".  Step two asks for exactly that many cards; the
number comes from the session, never from the client.  Once every card is
stored the pending keys are popped.

  NoSet ──POST /cardset/create──▶ SetPendingCards{id,title,n} ──POST /cards/create/<id>──▶ Complete

URLs:
  GET|POST /cardset/create        – step one
  GET|POST /cards/create/<id>     – step two (only for the pending set)
"""
import logging

from flask import Blueprint, render_template, redirect, url_for, flash, session, abort
from flask_login import login_required, current_user

from memorycards.forms.cardsets import CardSetCreateForm, cards_create_form
from memorycards.models.card import Card
from memorycards.models.card_set import CardSet

log = logging.getLogger(__name__)
cardsets_bp = Blueprint("cardsets", __name__)

PENDING_ID = "pending_card_set_id"
PENDING_TITLE = "pending_card_set_title"
PENDING_CARDS_NUMBER = "pending_cards_number"


def _pending_card_set(card_set_id: int) -> tuple[str, int]:
    """Return (title, cards_number) of the pending set, or abort 404 if it isn't this one."""
    if session.get(PENDING_ID) != card_set_id:
        abort(404)
    cards_number = session.get(PENDING_CARDS_NUMBER)
    if not cards_number:
        abort(404)
    return session.get(PENDING_TITLE, ""), cards_number


# ── Step one ──────────────────────────────────────────────────────────────────

@cardsets_bp.route("/cardset/create", methods=["GET", "POST"])
@login_required
def create():
    form = CardSetCreateForm()
    if form.checked_on_submit():
        title = form.title.data.strip()
        cards_number = form.cards_number.data
        card_set_id = CardSet.insert(title, cards_number)
        log.info("Card set %d created by user=%s (%d cards declared)",
                 card_set_id, current_user.id, cards_number)

        session[PENDING_ID] = card_set_id
        session[PENDING_TITLE] = title
        session[PENDING_CARDS_NUMBER] = cards_number
        flash("Empty card set successfully created!", "success")
        return redirect(url_for("cardsets.create_cards", card_set_id=card_set_id), 303)

    status = 422 if form.is_submitted() else 200
    return render_template("cardsets/create.html", form=form, active_page="create"), status


# ── Step two ──────────────────────────────────────────────────────────────────

@cardsets_bp.route("/cards/create/<int:card_set_id>", methods=["GET", "POST"])
@login_required
def create_cards(card_set_id):
    title, cards_number = _pending_card_set(card_set_id)

    form = cards_create_form(cards_number)
    if form.checked_on_submit():
        Card.insert_many(card_set_id, form.pairs())
        log.info("Card set %d populated with %d cards", card_set_id, cards_number)

        session.pop(PENDING_ID, None)
        session.pop(PENDING_TITLE, None)
        session.pop(PENDING_CARDS_NUMBER, None)
        flash("Card set successfully created!", "success")
        return redirect(url_for("main.view", card_set_id=card_set_id), 303)

    status = 422 if form.is_submitted() else 200
    return render_template(
        "cards/create.html",
        form=form,
        card_set_id=card_set_id,
        title=title,
        cards_number=cards_number,
        active_page="create",
    ), status
