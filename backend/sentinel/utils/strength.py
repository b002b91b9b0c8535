from .password_policy import resolve_policy
from .validators import (
    validate_length,
    validate_character_types,
    validate_repetition,
    validate_sequential,
    validate_common_password,
    validate_personal_info,
    validate_keyboard_pattern
)

STRENGTH_LABELS = ('very-weak', 'weak', 'medium', 'strong', 'very-strong')

MAX_SCORE = len(STRENGTH_LABELS) - 1

# Run order decides which failure becomes the warning
CHECKS = (
    ('length', validate_length),
    ('character_types', validate_character_types),
    ('repetition', validate_repetition),
    ('sequential', validate_sequential),
    ('common_password', validate_common_password),
    ('personal_info', validate_personal_info),
    ('keyboard_pattern', validate_keyboard_pattern)
)

CHECK_IDS = tuple(check_id for check_id, _ in CHECKS)

_CHECKS_BY_ID = dict(CHECKS)


def run_check(check_id: str, password: str, policy=None, bloom_filter=None) -> dict:
    """Run a single check by identifier; unknown identifiers raise KeyError"""
    check = _CHECKS_BY_ID[check_id]
    if check is validate_common_password:
        return check(password, policy, bloom_filter=bloom_filter)
    return check(password, policy)


def calculate_score(passed_count: int, total: int = len(CHECKS)) -> int:
    """
    floor(passed / total * 5), capped at 4

    Rewards the number of independent rules passed. Six of seven passing
    still reaches the top score, even when the one failure is the
    common-password check.
    """
    if total <= 0:
        return 0
    return min(MAX_SCORE, passed_count * len(STRENGTH_LABELS) // total)


def validate(password: str, policy=None, bloom_filter=None) -> dict:
    """
    Run every check and summarise the result

    Returns:
        dict with 'valid', 'score' (0-4), 'strength', 'checks' (check id ->
        passed), 'suggestions' (failure messages in run order) and, when
        anything failed, 'warning' (the first suggestion)
    """
    policy = resolve_policy(policy)
    checks = {}
    suggestions = []

    for check_id in CHECK_IDS:
        result = run_check(check_id, password, policy, bloom_filter)
        checks[check_id] = result['passed']
        if not result['passed']:
            suggestions.append(result['message'])

    score = calculate_score(sum(checks.values()))

    report = {
        'valid': all(checks.values()),
        'score': score,
        'strength': STRENGTH_LABELS[score],
        'checks': checks,
        'suggestions': suggestions
    }
    if suggestions:
        report['warning'] = suggestions[0]

    return report
