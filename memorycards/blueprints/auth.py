"""
Signup, login and logout.

URLs:
  GET|POST /user/signup
  GET|POST /user/login
  POST     /user/logout

Login and logout regenerate the session id before the authenticated user id is
written or removed.
"""
import logging
from urllib.parse import urlparse

from flask import (
    Blueprint, render_template, redirect, url_for, flash,
    request, session, current_app,
)
from flask_login import login_user, logout_user, login_required, current_user

from memorycards.extensions import db, limiter
from memorycards.forms.auth import SignupForm, LoginForm
from memorycards.models.errors import DuplicateEmail, InvalidCredentials
from memorycards.models.user import User

log = logging.getLogger(__name__)
auth_bp = Blueprint("auth", __name__, url_prefix="/user")


def _auth_rate_limit() -> str:
    return current_app.config.get("AUTH_RATE_LIMIT", "10 per minute")


def _safe_next(target: str | None) -> str:
    """Only follow same-site relative redirects."""
    if not target:
        return url_for("cardsets.create")
    parsed = urlparse(target)
    if (
        parsed.scheme or parsed.netloc
        or not target.startswith("/")
        or target.startswith("//")
        or "\\" in target
    ):
        return url_for("cardsets.create")
    return target


@auth_bp.route("/signup", methods=["GET", "POST"])
@limiter.limit(_auth_rate_limit, methods=["POST"])
def signup():
    form = SignupForm()
    if form.checked_on_submit():
        try:
            user_id = User.insert(form.name.data, form.email.data, form.password.data)
        except DuplicateEmail:
            form.validator.add_field_error("email", "Email address is already in use")
        else:
            log.info("User %d signed up", user_id)
            flash("Your signup was successful. Please log in.", "success")
            return redirect(url_for("auth.login"), 303)

    status = 422 if form.is_submitted() else 200
    return render_template("auth/signup.html", form=form, active_page="signup"), status


@auth_bp.route("/login", methods=["GET", "POST"])
@limiter.limit(_auth_rate_limit, methods=["POST"])
def login():
    form = LoginForm()
    if form.checked_on_submit():
        try:
            user_id = User.authenticate(form.email.data, form.password.data)
        except InvalidCredentials:
            log.info("Failed login from %s", request.remote_addr)
            form.validator.add_non_field_error("Email or password is incorrect")
        else:
            current_app.session_interface.regenerate(session)
            login_user(db.session.get(User, user_id))
            log.info("User %d logged in", user_id)
            return redirect(_safe_next(request.args.get("next")), 303)

    status = 422 if form.is_submitted() else 200
    return render_template("auth/login.html", form=form, active_page="login"), status


@auth_bp.route("/logout", methods=["POST"])
@login_required
def logout():
    user_id = current_user.id
    current_app.session_interface.regenerate(session)
    logout_user()
    log.info("User %d logged out", user_id)
    flash("You've been logged out successfully!", "success")
    return redirect(url_for("main.home"), 303)
