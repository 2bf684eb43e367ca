import logging
import os

from flask import Flask
from dotenv import load_dotenv

from evault.extensions import db, bcrypt, login_manager, csrf


def create_app(test_config=None):
    load_dotenv()

    app = Flask(__name__, instance_relative_config=True)
    app.config.from_mapping(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev"),
        SQLALCHEMY_DATABASE_URI=os.getenv("DATABASE_URL", "sqlite:///database.db"),
        UPLOAD_FOLDER=os.getenv("EVAULT_UPLOAD_FOLDER", os.path.join(app.instance_path, "uploads")),
        OBJECT_STORE=os.getenv("EVAULT_OBJECT_STORE", "local"),
        MAX_CONTENT_LENGTH=int(os.getenv("EVAULT_MAX_UPLOAD_MB", "50")) * 1024 * 1024,
        LOG_LEVEL=os.getenv("EVAULT_LOG_LEVEL", "INFO"),
    )
    if test_config is not None:
        app.config.update(test_config)

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("evault").setLevel(app.config["LOG_LEVEL"])

    # Initialize extensions
    db.init_app(app)
    bcrypt.init_app(app)
    login_manager.init_app(app)
    csrf.init_app(app)
    login_manager.login_view = "auth.login"

    from evault.models import User, FileRecord  # noqa: F401  (tables for create_all)

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    from evault import services
    services.init_app(app)

    # Register blueprints
    from evault.routes.auth import auth_bp
    from evault.routes.dashboard import dashboard_bp
    from evault.routes.files import files_bp
    from evault.routes.keys import keys_bp
    from evault.routes.api import api_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(files_bp)
    app.register_blueprint(keys_bp)
    app.register_blueprint(api_bp)

    with app.app_context():
        db.create_all()

    return app
