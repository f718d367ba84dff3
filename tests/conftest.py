"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-west-2')
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('LOG_LEVEL', 'INFO')


@pytest.fixture
def mailgun_env(monkeypatch):
    """Clear Mailgun environment variables for a test."""
    for name in ('MAILGUN_DOMAIN', 'MAILGUN_API_KEY', 'MAILGUN_API_KEY_SECRET_ID'):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
