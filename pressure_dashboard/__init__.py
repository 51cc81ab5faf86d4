# pressure_dashboard/__init__.py
from flask import Flask, jsonify
from .extensions import db, migrate, jwt
from dotenv import load_dotenv
from flask_cors import CORS
import os

load_dotenv()


def _int_env(name, default):
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def create_app(test_config=None):
    app = Flask(__name__)

    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv('DATABASE_URL', 'sqlite:///pressure_dashboard.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['JWT_SECRET_KEY'] = os.getenv('JWT_SECRET_KEY', 'super-secret')
    app.config['FRONTEND_URL'] = os.getenv('FRONTEND_URL', 'http://localhost:3000')
    app.config['PUBLIC_APP_URL'] = os.getenv('PUBLIC_APP_URL', app.config['FRONTEND_URL'])
    app.config['SHARE_TOKEN_TTL_HOURS'] = _int_env('SHARE_TOKEN_TTL_HOURS', 48)

    # Firebase Cloud Messaging; the VAPID key is only handed to web clients.
    app.config['FIREBASE_CREDENTIALS_PATH'] = os.getenv('FIREBASE_CREDENTIALS_PATH', 'firebase/firebase-adminsdk.json')
    app.config['FIREBASE_VAPID_KEY'] = os.getenv('FIREBASE_VAPID_KEY', '')

    # Blood pressure thresholds (mmHg) and accepted ranges
    app.config['PSYS_HIGH'] = _int_env('PSYS_HIGH', 180)
    app.config['PDYS_HIGH'] = _int_env('PDYS_HIGH', 120)
    app.config['PSYS_LOW'] = _int_env('PSYS_LOW', 90)
    app.config['PDYS_LOW'] = _int_env('PDYS_LOW', 60)
    app.config['PSYS_MIN'] = _int_env('PSYS_MIN', 40)
    app.config['PSYS_MAX'] = _int_env('PSYS_MAX', 300)
    app.config['PDYS_MIN'] = _int_env('PDYS_MIN', 30)
    app.config['PDYS_MAX'] = _int_env('PDYS_MAX', 200)
    app.config['PULSE_MIN'] = _int_env('PULSE_MIN', 25)
    app.config['PULSE_MAX'] = _int_env('PULSE_MAX', 300)
    app.config['ADDITIONAL_TAGS'] = [
        t.strip() for t in os.getenv('ADDITIONAL_TAGS', '').split(',') if t.strip()
    ]

    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO').upper()

    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    CORS(app,
         origins=[app.config['FRONTEND_URL']],
         supports_credentials=True,
         methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
         allow_headers=["Content-Type", "Authorization", "X-Requested-With"])

    @app.errorhandler(Exception)
    def handle_error(e):
        from werkzeug.exceptions import HTTPException
        if isinstance(e, HTTPException):
            return jsonify(success=False, message=e.description), e.code
        app.logger.exception("Unhandled error")
        return jsonify(success=False, message="Internal error"), 500

    from . import models  # noqa: F401
    from .routes.api_routes import api_bp
    from .routes.user_routes import user_bp
    from .routes.notification_routes import notification_bp

    app.register_blueprint(api_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(notification_bp)

    return app
