"""
Password policy tests
"""
import dataclasses

import pytest

from sentinel.utils.password_policy import PasswordPolicy, PolicyError, DEFAULT_POLICY, resolve_policy


class TestDefaults:
    """Default value tests"""

    def test_defaults(self):
        policy = PasswordPolicy()

        assert policy.min_length == 8
        assert policy.max_length == 128
        assert not any([
            policy.require_uppercase,
            policy.require_lowercase,
            policy.require_digit,
            policy.require_symbol
        ])
        assert policy.max_repeated_chars == 3
        assert policy.check_sequential and policy.check_keyboard_patterns and policy.check_common_passwords
        assert policy.personal_info == ()

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_POLICY.min_length = 4

    def test_personal_info_stored_as_tuple(self):
        policy = PasswordPolicy(personal_info=['john', 'doe'])
        assert policy.personal_info == ('john', 'doe')

    def test_rejects_bare_string_personal_info(self):
        with pytest.raises(PolicyError):
            PasswordPolicy(personal_info='johndoe')


class TestFromDict:
    """Mapping parser tests"""

    def test_none_returns_base(self):
        assert PasswordPolicy.from_dict(None) is DEFAULT_POLICY

    def test_snake_case(self):
        policy = PasswordPolicy.from_dict({'min_length': 12, 'require_symbol': True})
        assert policy.min_length == 12
        assert policy.require_symbol is True
        assert policy.max_length == 128

    def test_camel_case(self):
        policy = PasswordPolicy.from_dict({
            'minLength': 12,
            'checkCommonPasswords': False,
            'personalInfo': ['johndoe']
        })
        assert policy.min_length == 12
        assert policy.check_common_passwords is False
        assert policy.personal_info == ('johndoe',)

    def test_applies_on_top_of_base(self):
        base = PasswordPolicy(min_length=16, require_digit=True)
        policy = PasswordPolicy.from_dict({'require_symbol': True}, base=base)

        assert policy.min_length == 16
        assert policy.require_digit is True
        assert policy.require_symbol is True

    def test_inverted_bounds_accepted(self):
        policy = PasswordPolicy.from_dict({'min_length': 20, 'max_length': 4})
        assert policy.min_length > policy.max_length

    @pytest.mark.parametrize('data', [
        'not a dict',
        {'entropy': True},
        {'min_length': '8'},
        {'min_length': True},
        {'min_length': 8.5},
        {'check_sequential': 'yes'},
        {'require_digit': 1},
        {'personal_info': 'johndoe'},
        {'personal_info': ['john', 42]},
    ])
    def test_rejects_bad_shapes(self, data):
        with pytest.raises(PolicyError):
            PasswordPolicy.from_dict(data)

    def test_policy_error_is_value_error(self):
        assert issubclass(PolicyError, ValueError)

    def test_to_dict(self):
        data = PasswordPolicy(personal_info=('john',)).to_dict()

        assert data['personal_info'] == ['john']
        assert data['min_length'] == 8
        assert PasswordPolicy.from_dict(data) == PasswordPolicy(personal_info=('john',))


class TestResolvePolicy:
    """Policy argument normalisation tests"""

    def test_none_is_default(self):
        assert resolve_policy(None) is DEFAULT_POLICY

    def test_policy_returned_unchanged(self):
        policy = PasswordPolicy(min_length=12)
        assert resolve_policy(policy) is policy

    def test_mapping_is_parsed(self):
        assert resolve_policy({'minLength': 12, 'require_digit': True}) == PasswordPolicy(
            min_length=12, require_digit=True
        )

    def test_bad_mapping_raises_policy_error(self):
        with pytest.raises(PolicyError):
            resolve_policy({'entropy': True})

    @pytest.mark.parametrize('policy', [42, 'min_length=12', ['min_length', 12]])
    def test_other_types_rejected(self, policy):
        with pytest.raises(TypeError):
            resolve_policy(policy)
