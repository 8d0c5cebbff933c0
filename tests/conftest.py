"""
Shared fixtures for the intake service tests
"""

import io
from unittest.mock import Mock

import pytest

from app import create_app
from api.intake import limiter
from services.bot_check import BotCheckResult


@pytest.fixture
def app():
    """Application built from TestingConfig with mail and bot check stubbed out"""
    app = create_app('testing')
    limiter.reset()

    app.mail_dispatcher = Mock()
    app.mail_dispatcher.send.return_value = '<test-message@example.com>'

    app.bot_verifier = Mock()
    app.bot_verifier.enabled = False
    app.bot_verifier.verify.return_value = BotCheckResult(passed=True, score=0.9)

    yield app

    limiter.reset()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def job_form():
    """Factory for a valid job application multipart body"""
    def _build(**overrides):
        data = {
            'fullName': 'Jane Doe',
            'email': 'jane.doe@example.com',
            'phone': '+256 700 000000',
            'education': 'Bachelor of Commerce',
            'experience': '3 years in insurance sales',
            'motivation': 'I enjoy helping families find cover.',
            'cv': (io.BytesIO(b'%PDF-1.4 test cv'), 'jane_doe_cv.pdf', 'application/pdf'),
        }
        data.update(overrides)
        return {key: value for key, value in data.items() if value is not None}
    return _build


@pytest.fixture
def insurance_form():
    """Factory for a valid insurance inquiry form body"""
    def _build(**overrides):
        data = {
            'fullName': 'John Okello',
            'email': 'john.okello@example.com',
            'phone': '+256 772 123456',
            'insuranceType': 'Personal',
            'personalPlan': 'Gold',
            'ageCategory': '26-35',
            'numberOfPeople': '3',
            'motivation': 'Looking for family cover.',
        }
        data.update(overrides)
        return {key: value for key, value in data.items() if value is not None}
    return _build
