"""
Public pages.

URLs:
  GET /                    – all card sets, newest first
  GET /cardset/view/<id>   – one card set with its cards
"""
from flask import Blueprint, render_template, abort

from memorycards.models.card_set import CardSet
from memorycards.models.errors import RecordNotFound

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def home():
    return render_template(
        "main/home.html",
        card_sets=CardSet.list_all(),
        active_page="home",
    )


@main_bp.route("/cardset/view/<int:card_set_id>")
def view(card_set_id):
    try:
        card_set = CardSet.get(card_set_id)
    except RecordNotFound:
        abort(404)
    return render_template("cardsets/view.html", card_set=card_set)
