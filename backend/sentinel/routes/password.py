from flask import Blueprint, jsonify, current_app

from sentinel.middleware.request_middleware import password_payload, get_default_policy, get_bloom_filter
from sentinel.utils.strength import validate, run_check, CHECK_IDS

password_bp = Blueprint('password', __name__)


@password_bp.route('/validate', methods=['POST'])
@password_payload
def validate_password(password, policy):
    """
    Score a password and explain why it is weak
    """
    report = validate(password, policy, bloom_filter=get_bloom_filter())

    failed = [check_id for check_id, passed in report['checks'].items() if not passed]
    current_app.logger.info(
        f'Password validated: valid={report["valid"]} score={report["score"]} failed={failed}'
    )

    return jsonify(report), 200


@password_bp.route('/check/<check_id>', methods=['POST'])
@password_payload
def run_single_check(check_id, password, policy):
    """Run one check by its identifier"""
    if check_id not in CHECK_IDS:
        return jsonify({
            'error': 'Unknown check',
            'message': f'Available checks: {", ".join(CHECK_IDS)}'
        }), 404

    result = run_check(check_id, password, policy, bloom_filter=get_bloom_filter())

    return jsonify({
        'check': check_id,
        **result
    }), 200


@password_bp.route('/policy', methods=['GET'])
def get_policy():
    """Get the default password policy"""
    return jsonify(get_default_policy().to_dict()), 200
