# regdesk/__init__.py
import logging

import click
from flask import Flask, render_template
from flask_wtf.csrf import CSRFError

from .extensions import db, migrate, csrf
from .config import get_config
from .blueprints import register_blueprints


def configure_logging(app: Flask) -> None:
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(level)


def create_app(config: str | None = None):
    app = Flask(__name__)
    app.config.from_object(get_config(config))

    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    register_blueprints(app)

    @app.errorhandler(CSRFError)
    def handle_csrf_error(e):
        app.logger.warning("CSRF check failed: %s", e.description)
        return render_template("csrf_error.html", title="Form expired", reason=e.description), 400

    @app.cli.command("init-db")
    def init_db_command():
        """建表（开发环境用，正式环境请走 flask db upgrade）"""
        from .models import user  # noqa: F401
        db.create_all()
        click.echo("Database tables created.")

    return app
