from functools import wraps
from flask import current_app, jsonify, request

from sentinel.utils.password_policy import PasswordPolicy, PolicyError


def get_default_policy():
    """Policy configured for the current app"""
    return current_app.extensions['sentinel']['policy']


def get_bloom_filter():
    """Common password filter configured for the current app"""
    return current_app.extensions['sentinel']['bloom_filter']


def password_payload(fn):
    """
    Decorator to parse {"password": ..., "policy": {...}} request bodies

    The request policy is applied on top of the configured default policy.
    Adds `password` and `policy` to kwargs for the route to use.

    Usage:
        @password_bp.route('/validate', methods=['POST'])
        @password_payload
        def validate_password(password, policy):
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': 'Request body must be a JSON object'}), 400

        password = data.get('password')
        if not isinstance(password, str):
            return jsonify({'error': 'Password is required and must be a string'}), 400

        try:
            policy = PasswordPolicy.from_dict(data.get('policy'), base=get_default_policy())
        except PolicyError as e:
            return jsonify({
                'error': 'Invalid policy',
                'message': str(e)
            }), 400

        kwargs['password'] = password
        kwargs['policy'] = policy

        return fn(*args, **kwargs)
    return wrapper
