"""
MemoryCards – Flask application factory.
Flashcard sets with question/answer cards, signup/login and server-side sessions.
"""
import logging
import os

from cachelib import SimpleCache
from flask import Flask, render_template, session
from sqlalchemy.exc import SQLAlchemyError

from memorycards.config import config
from memorycards.extensions import db, login_manager, csrf, limiter, migrate, server_session
from memorycards.utils.logging_config import setup_logging

log = logging.getLogger(__name__)


def create_app(config_name: str = "default") -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config[config_name])

    # Ensure instance directory exists (SQLite lives here)
    os.makedirs(app.instance_path, exist_ok=True)

    setup_logging(app)

    # ── Initialise extensions ────────────────────────────────────────────────
    db.init_app(app)
    login_manager.init_app(app)
    csrf.init_app(app)
    limiter.init_app(app)
    migrate.init_app(app, db)

    if app.config.get("TALISMAN_ENABLED"):
        from flask_talisman import Talisman
        Talisman(app, **app.config.get("TALISMAN_CONFIG", {}))

    # Server-side sessions: the cookie carries only the session id
    if app.config["SESSION_TYPE"] == "sqlalchemy":
        app.config.setdefault("SESSION_SQLALCHEMY", db)
    elif app.config["SESSION_TYPE"] == "cachelib":
        app.config.setdefault("SESSION_CACHELIB", SimpleCache())
    server_session.init_app(app)

    # ── Register blueprints ──────────────────────────────────────────────────
    from memorycards.blueprints.main import main_bp
    from memorycards.blueprints.cardsets import cardsets_bp
    from memorycards.blueprints.auth import auth_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(cardsets_bp)
    app.register_blueprint(auth_bp)

    # ── Authentication ───────────────────────────────────────────────────────
    @login_manager.user_loader
    def load_user(user_id):
        from memorycards.models.user import User
        return db.session.get(User, int(user_id))

    @app.before_request
    def drop_stale_identity():
        """Forget an authenticated user id whose account no longer exists."""
        from memorycards.models.user import User
        user_id = session.get("_user_id")
        if user_id is None:
            return
        try:
            exists = User.exists(int(user_id))
        except (TypeError, ValueError):
            exists = False
        if not exists:
            log.warning("Dropping session identity for missing user %r", user_id)
            session.pop("_user_id", None)
            session.pop("_fresh", None)

    # ── Error handlers ───────────────────────────────────────────────────────
    @app.errorhandler(400)
    def bad_request(e):
        return render_template("errors/400.html"), 400

    @app.errorhandler(404)
    def not_found(e):
        return render_template("errors/404.html"), 404

    @app.errorhandler(429)
    def too_many_requests(e):
        return render_template("errors/429.html"), 429

    @app.errorhandler(SQLAlchemyError)
    def storage_error(e):
        log.exception("Storage error")
        db.session.rollback()
        return render_template("errors/500.html"), 500

    @app.errorhandler(500)
    def internal_error(e):
        db.session.rollback()
        return render_template("errors/500.html"), 500

    # ── Database ─────────────────────────────────────────────────────────────
    with app.app_context():
        # Register all models with SQLAlchemy before create_all().
        import importlib
        importlib.import_module("memorycards.models")
        db.create_all()

    return app
