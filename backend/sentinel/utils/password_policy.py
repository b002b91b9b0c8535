from collections.abc import Mapping
from dataclasses import dataclass, fields, replace, asdict


class PolicyError(ValueError):
    """Raised when a policy mapping has unknown keys or values of the wrong type"""


@dataclass(frozen=True)
class PasswordPolicy:
    """
    Options controlling which checks run and their thresholds

    Defaults follow NIST SP 800-63B: 8 to 128 characters, no composition
    rules, and screening against common passwords and obvious patterns.
    Well-formedness (e.g. min_length <= max_length) is not enforced.
    """

    min_length: int = 8
    max_length: int = 128
    require_uppercase: bool = False
    require_lowercase: bool = False
    require_digit: bool = False
    require_symbol: bool = False
    max_repeated_chars: int = 3
    check_sequential: bool = True
    check_keyboard_patterns: bool = True
    check_common_passwords: bool = True
    personal_info: tuple = ()

    def __post_init__(self):
        if isinstance(self.personal_info, str):
            raise PolicyError('personal_info must be a list of strings, not a single string')
        object.__setattr__(self, 'personal_info', tuple(self.personal_info))

    @classmethod
    def from_dict(cls, data, base=None) -> 'PasswordPolicy':
        """
        Build a policy from a mapping, applying it on top of `base`

        Accepts snake_case field names and the camelCase names used by
        JavaScript clients (minLength, checkCommonPasswords, ...).
        """
        base = base or DEFAULT_POLICY
        if data is None:
            return base
        if not isinstance(data, Mapping):
            raise PolicyError('Policy must be an object')

        overrides = {}
        for key, value in data.items():
            name = CAMEL_CASE_FIELDS.get(key, key)
            if name not in FIELD_TYPES:
                raise PolicyError(f'Unknown policy option: {key}')
            overrides[name] = _coerce(name, value)

        return replace(base, **overrides)

    def to_dict(self) -> dict:
        data = asdict(self)
        data['personal_info'] = list(self.personal_info)
        return data


FIELD_TYPES = {field.name: field.type for field in fields(PasswordPolicy)}

CAMEL_CASE_FIELDS = {
    'minLength': 'min_length',
    'maxLength': 'max_length',
    'requireUppercase': 'require_uppercase',
    'requireLowercase': 'require_lowercase',
    'requireDigit': 'require_digit',
    'requireSymbol': 'require_symbol',
    'maxRepeatedChars': 'max_repeated_chars',
    'checkSequential': 'check_sequential',
    'checkKeyboardPatterns': 'check_keyboard_patterns',
    'checkCommonPasswords': 'check_common_passwords',
    'personalInfo': 'personal_info'
}

DEFAULT_POLICY = PasswordPolicy()


def _coerce(name, value):
    expected = FIELD_TYPES[name]

    if expected is bool:
        if not isinstance(value, bool):
            raise PolicyError(f'{name} must be a boolean')
        return value

    if expected is int:
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, int):
            raise PolicyError(f'{name} must be an integer')
        return value

    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise PolicyError(f'{name} must be a list of strings')
    return tuple(value)


def resolve_policy(policy=None) -> PasswordPolicy:
    """
    Accept a PasswordPolicy, a mapping of options, or None for the defaults
    """
    if policy is None:
        return DEFAULT_POLICY
    if isinstance(policy, PasswordPolicy):
        return policy
    if isinstance(policy, Mapping):
        return PasswordPolicy.from_dict(policy)
    raise TypeError(f'policy must be a PasswordPolicy or a mapping, not {type(policy).__name__}')
