from flask import Flask


# 1. Create extension instances WITHOUT an app
# They will be "connected" to the app inside the factory
from flask_mail import Mail
mail = Mail()
from flask_caching import Cache
cache = Cache()

from flask_login import LoginManager
login_manager = LoginManager()


def create_app(config_class='config.Config'):
    """
    Application Factory Function
    """

    app = Flask(__name__, instance_relative_config=True)

    # Load configuration from the config.py file
    app.config.from_object(config_class)

    login_manager.init_app(app)
    mail.init_app(app)
    cache.init_app(app)

    # Import models so the Flask-Login loaders are registered
    from . import models

    from .errors import register_error_handlers
    register_error_handlers(app)

    # Register Blueprints
    # Imports are *inside* the factory to avoid circular import issues
    with app.app_context():
        # Spreadsheet gateway, repositories and request lifecycle, built once per app
        from .services.container import init_services
        init_services(app)

        from .achievements_routes import achievements_bp
        from .requests_routes import requests_bp
        from .members_routes import members_bp

        app.register_blueprint(achievements_bp)
        app.register_blueprint(requests_bp)
        app.register_blueprint(members_bp)

    # Register CLI commands
    from app.commands.check_sheets import check_sheets

    app.cli.add_command(check_sheets)

    return app
