import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name, default):
    value = os.environ.get(name)
    return int(value) if value else default


def _env_bool(name, default):
    value = os.environ.get(name)
    if not value:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration"""
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # CORS
    CORS_ORIGINS = [
        origin.strip()
        for origin in (os.environ.get('CORS_ORIGINS') or 'http://localhost:3000,http://localhost:3001').split(',')
        if origin.strip()
    ]

    # Default password policy, overridable per request
    PASSWORD_POLICY = {
        'min_length': _env_int('PASSWORD_MIN_LENGTH', 8),
        'max_length': _env_int('PASSWORD_MAX_LENGTH', 128),
        'require_uppercase': _env_bool('PASSWORD_REQUIRE_UPPERCASE', False),
        'require_lowercase': _env_bool('PASSWORD_REQUIRE_LOWERCASE', False),
        'require_digit': _env_bool('PASSWORD_REQUIRE_DIGIT', False),
        'require_symbol': _env_bool('PASSWORD_REQUIRE_SYMBOL', False),
        'max_repeated_chars': _env_int('PASSWORD_MAX_REPEATED_CHARS', 3),
        'check_sequential': _env_bool('PASSWORD_CHECK_SEQUENTIAL', True),
        'check_keyboard_patterns': _env_bool('PASSWORD_CHECK_KEYBOARD_PATTERNS', True),
        'check_common_passwords': _env_bool('PASSWORD_CHECK_COMMON_PASSWORDS', True)
    }

    # JSON export of build_bloom_filter.py; the bundled filter is used when unset
    COMMON_PASSWORD_FILTER_FILE = os.environ.get('COMMON_PASSWORD_FILTER_FILE')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'DEBUG'


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    PASSWORD_POLICY = {}
    COMMON_PASSWORD_FILTER_FILE = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
