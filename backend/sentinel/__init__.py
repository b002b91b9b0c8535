import json

from flask import Flask
from flask_cors import CORS

from .config import config


def create_app(config_name='default'):
    """Application factory"""
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    CORS(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}})

    init_password_engine(app)

    # Register blueprints
    from .routes.password import password_bp

    app.register_blueprint(password_bp, url_prefix='/api/password')

    return app


def init_password_engine(app):
    """Resolve the default policy and common password filter once per app"""
    from .utils.bloom_filter import BloomFilter
    from .utils.common_passwords import COMMON_PASSWORD_FILTER
    from .utils.password_policy import PasswordPolicy

    policy = PasswordPolicy.from_dict(app.config.get('PASSWORD_POLICY') or {})

    bloom_filter = COMMON_PASSWORD_FILTER
    filter_file = app.config.get('COMMON_PASSWORD_FILTER_FILE')
    if filter_file:
        with open(filter_file, 'r', encoding='utf-8') as f:
            bloom_filter = BloomFilter.from_dict(json.load(f))
        app.logger.info(f'Loaded common password filter from {filter_file}: {bloom_filter!r}')

    app.extensions['sentinel'] = {
        'policy': policy,
        'bloom_filter': bloom_filter
    }
