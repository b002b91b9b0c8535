"""
Shared pytest fixtures
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'backend'))

from sentinel import create_app


@pytest.fixture
def app():
    """Flask app with the testing configuration"""
    return create_app('testing')


@pytest.fixture
def client(app):
    """Flask test client"""
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def strong_policy():
    """Policy requiring every character class and 12+ characters"""
    return {
        'min_length': 12,
        'require_uppercase': True,
        'require_lowercase': True,
        'require_digit': True,
        'require_symbol': True
    }
