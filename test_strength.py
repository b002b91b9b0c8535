"""
Aggregation and scoring tests
"""
import pytest

from sentinel.utils.bloom_filter import BloomFilter
from sentinel.utils.password_policy import PasswordPolicy
from sentinel.utils.strength import (
    validate,
    run_check,
    calculate_score,
    CHECK_IDS,
    STRENGTH_LABELS
)

SAMPLE_PASSWORDS = [
    '',
    'a',
    'short',
    'password',
    'qwerty123',
    '1111',
    'aaaaaaaaaaaa',
    'johndoe123',
    'Tr0ub4dor&3',
    'MyS3cur3!P@ssw0rd',
    'correct horse battery staple',
    'x' * 200,
]


class TestScenarios:
    """End-to-end scenarios"""

    def test_common_password(self):
        report = validate('password', PasswordPolicy())
        assert report['checks']['common_password'] is False
        assert report['valid'] is False

    def test_strong_password(self, strong_policy):
        report = validate('MyS3cur3!P@ssw0rd', PasswordPolicy.from_dict(strong_policy))
        assert report['valid'] is True
        assert report['score'] == 4
        assert report['strength'] == 'very-strong'
        assert report['suggestions'] == []
        assert 'warning' not in report

    def test_keyboard_and_sequential(self):
        report = validate('qwerty123')
        assert report['checks']['keyboard_pattern'] is False
        assert report['checks']['sequential'] is False

    def test_personal_info(self):
        report = validate('johndoe123', PasswordPolicy(personal_info=['johndoe']))
        assert report['checks']['personal_info'] is False
        assert 'Password contains personal information' in report['suggestions']

    def test_empty_password(self):
        report = validate('', PasswordPolicy(min_length=8))
        assert report['checks']['length'] is False
        assert report['valid'] is False

    def test_short_password_feedback(self, strong_policy):
        report = validate('short', PasswordPolicy.from_dict(strong_policy))
        assert report['checks']['length'] is False
        assert any('12 characters' in suggestion for suggestion in report['suggestions'])


class TestAggregation:
    """Ordering and scoring tests"""

    def test_suggestions_follow_run_order(self):
        report = validate('1111')

        assert report['suggestions'] == [
            'Password must be at least 8 characters',
            'Password contains too many repeated characters (max 3)',
            'Password is too common. Please choose a more unique password.'
        ]
        assert report['warning'] == 'Password must be at least 8 characters'
        assert report['score'] == 2
        assert report['strength'] == 'medium'

    def test_single_common_failure_still_scores_four(self):
        # Ratio scoring: six of seven checks passing reaches the top score
        report = validate('sunshine')

        assert report['checks']['common_password'] is False
        assert sum(report['checks'].values()) == 6
        assert report['score'] == 4
        assert report['strength'] == 'very-strong'
        assert report['valid'] is False

    def test_disabled_checks_report_passed(self):
        policy = PasswordPolicy(
            min_length=0,
            check_sequential=False,
            check_keyboard_patterns=False,
            check_common_passwords=False
        )
        report = validate('qwerty123', policy)

        assert list(report['checks']) == list(CHECK_IDS)
        assert all(report['checks'].values())
        assert report['valid'] is True
        assert report['score'] == 4

    def test_custom_bloom_filter(self):
        bloom = BloomFilter.build(['zebracrossing'], size=1024, hash_count=5)

        assert validate('ZebraCrossing', bloom_filter=bloom)['checks']['common_password'] is False
        assert validate('password', bloom_filter=bloom)['checks']['common_password'] is True

    @pytest.mark.parametrize('passed_count, expected', [
        (0, 0), (1, 0), (2, 1), (3, 2), (4, 2), (5, 3), (6, 4), (7, 4)
    ])
    def test_calculate_score(self, passed_count, expected):
        assert calculate_score(passed_count) == expected

    def test_calculate_score_without_checks(self):
        assert calculate_score(0, 0) == 0

    def test_strength_labels(self):
        assert STRENGTH_LABELS == ('very-weak', 'weak', 'medium', 'strong', 'very-strong')


class TestReportInvariants:
    """Properties that hold for every report"""

    @pytest.mark.parametrize('password', SAMPLE_PASSWORDS)
    def test_invariants(self, password):
        report = validate(password, PasswordPolicy(personal_info=['johndoe']))
        passed_count = sum(report['checks'].values())

        assert set(report['checks']) == set(CHECK_IDS)
        assert report['valid'] == all(report['checks'].values())
        assert 0 <= report['score'] <= 4
        assert report['strength'] == STRENGTH_LABELS[report['score']]
        assert len(report['suggestions']) == len(CHECK_IDS) - passed_count
        if report['score'] == 4:
            assert passed_count >= 6

        if report['suggestions']:
            assert report['warning'] == report['suggestions'][0]
        else:
            assert 'warning' not in report


class TestRunCheck:
    """Single check dispatch tests"""

    def test_runs_named_check(self):
        assert run_check('sequential', 'abc') == {
            'passed': False,
            'message': 'Password contains sequential characters (e.g., abc, 123)'
        }

    def test_common_password_uses_given_filter(self):
        bloom = BloomFilter.build(['zebracrossing'], size=1024, hash_count=5)
        assert run_check('common_password', 'zebracrossing', bloom_filter=bloom)['passed'] is False

    def test_unknown_check(self):
        with pytest.raises(KeyError):
            run_check('entropy', 'password')


class TestPolicyArgument:
    """Policy argument forms accepted by validate"""

    def test_snake_case_mapping(self):
        report = validate('abcdefghij', {'min_length': 12})
        assert report['checks']['length'] is False
        assert report['warning'] == 'Password must be at least 12 characters'

    def test_camel_case_mapping(self):
        report = validate('johndoe123', {'personalInfo': ['johndoe']})
        assert report['checks']['personal_info'] is False

    def test_mapping_matches_policy_object(self, strong_policy):
        assert validate('MyS3cur3!P@ssw0rd', strong_policy) == validate(
            'MyS3cur3!P@ssw0rd', PasswordPolicy.from_dict(strong_policy)
        )

    def test_run_check_accepts_mapping(self):
        assert run_check('sequential', 'abc', {'checkSequential': False}) == {'passed': True}

    def test_unsupported_policy_type(self):
        with pytest.raises(TypeError):
            validate('password', 42)
