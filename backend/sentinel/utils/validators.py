"""
Independent password checks

Every check takes the password and an optional PasswordPolicy (or a mapping
of its options) and returns {'passed': True} or
{'passed': False, 'message': ...}. Given a PasswordPolicy, none of them
raise, whatever its values. Repetition and sequential detection are explicit
linear scans rather than regular expressions, so their running time stays
linear in the password length.
"""
import re

from .common_passwords import COMMON_PASSWORD_FILTER
from .keyboard_patterns import KEYBOARD_PATTERNS
from .password_policy import resolve_policy

SYMBOLS = frozenset('!@#$%^&*()_+-=[]{};\':"\\|,.<>/?')

MIN_SEQUENCE_LENGTH = 3
MIN_PERSONAL_INFO_LENGTH = 3

_UPPERCASE = re.compile(r'[A-Z]')
_LOWERCASE = re.compile(r'[a-z]')
_DIGIT = re.compile(r'[0-9]')

_KEYBOARD_PATTERNS = tuple((pattern, pattern[::-1]) for pattern in KEYBOARD_PATTERNS)


def _passed() -> dict:
    return {'passed': True}


def _failed(message: str) -> dict:
    return {'passed': False, 'message': message}


def has_uppercase(password: str) -> bool:
    return bool(_UPPERCASE.search(password))


def has_lowercase(password: str) -> bool:
    return bool(_LOWERCASE.search(password))


def has_digit(password: str) -> bool:
    return bool(_DIGIT.search(password))


def has_symbol(password: str) -> bool:
    return any(char in SYMBOLS for char in password)


def validate_length(password: str, policy=None) -> dict:
    """Check min_length first, then max_length"""
    policy = resolve_policy(policy)
    length = len(password)

    if length < policy.min_length:
        return _failed(f'Password must be at least {policy.min_length} characters')

    if length > policy.max_length:
        return _failed(f'Password must be at most {policy.max_length} characters')

    return _passed()


def validate_character_types(password: str, policy=None) -> dict:
    """
    Check the required character classes

    All missing classes are reported in a single message, in the order
    uppercase, lowercase, digit, symbol.
    """
    policy = resolve_policy(policy)
    missing = []

    if policy.require_uppercase and not has_uppercase(password):
        missing.append('uppercase letter')

    if policy.require_lowercase and not has_lowercase(password):
        missing.append('lowercase letter')

    if policy.require_digit and not has_digit(password):
        missing.append('digit')

    if policy.require_symbol and not has_symbol(password):
        missing.append('symbol')

    if missing:
        return _failed(f'Password must contain at least one {", ".join(missing)}')

    return _passed()


def validate_repetition(password: str, policy=None) -> dict:
    """
    Fail as soon as a run of identical characters exceeds max_repeated_chars
    """
    policy = resolve_policy(policy)
    if not password:
        return _passed()

    current = password[0]
    count = 1

    for char in password[1:]:
        if char == current:
            count += 1
            if count > policy.max_repeated_chars:
                return _failed(
                    f'Password contains too many repeated characters (max {policy.max_repeated_chars})'
                )
        else:
            current = char
            count = 1

    return _passed()


def has_sequential_run(password: str) -> bool:
    """True if three consecutive code points ascend or descend by one"""
    for i in range(len(password) - MIN_SEQUENCE_LENGTH + 1):
        first = ord(password[i])
        second = ord(password[i + 1])
        third = ord(password[i + 2])

        if second == first + 1 and third == second + 1:
            return True

        if second == first - 1 and third == second - 1:
            return True

    return False


def validate_sequential(password: str, policy=None) -> dict:
    """Detect runs like abc, ABC, 123, cba, 321 (case-sensitive)"""
    policy = resolve_policy(policy)
    if not policy.check_sequential:
        return _passed()

    if has_sequential_run(password):
        return _failed('Password contains sequential characters (e.g., abc, 123)')

    return _passed()


def validate_keyboard_pattern(password: str, policy=None) -> dict:
    """Detect keyboard walks from any supported layout, forwards or backwards"""
    policy = resolve_policy(policy)
    if not policy.check_keyboard_patterns:
        return _passed()

    lowercase = password.lower()

    for pattern, reversed_pattern in _KEYBOARD_PATTERNS:
        if pattern in lowercase or reversed_pattern in lowercase:
            return _failed('Password contains common keyboard patterns')

    return _passed()


def validate_common_password(password: str, policy=None, bloom_filter=None) -> dict:
    """
    Screen the password against the common password filter

    A match may be a false positive of the filter; a known common password
    is never missed.
    """
    policy = resolve_policy(policy)
    if not policy.check_common_passwords or not password:
        return _passed()

    bloom_filter = bloom_filter or COMMON_PASSWORD_FILTER
    if bloom_filter.might_contain(password.lower()):
        return _failed('Password is too common. Please choose a more unique password.')

    return _passed()


def normalize_personal_info(info: str) -> str:
    """Lower-case and trim; e-mail addresses are reduced to their local part"""
    normalized = info.lower().strip()
    if '@' in normalized:
        return normalized.split('@', 1)[0]
    return normalized


def validate_personal_info(password: str, policy=None) -> dict:
    """
    Reject passwords containing the user's own details

    Entries shorter than three characters (initials and the like) are ignored.
    """
    policy = resolve_policy(policy)
    if not policy.personal_info or not password:
        return _passed()

    lowercase = password.lower()

    for info in policy.personal_info:
        normalized = normalize_personal_info(info)
        if len(normalized) < MIN_PERSONAL_INFO_LENGTH:
            continue
        if normalized in lowercase:
            return _failed('Password contains personal information')

    return _passed()
