"""Shared fixtures for settings tests."""

import json
import logging

import pytest

from login_checker.config.settings import Settings
from login_checker.utils.logger import get_redactor

BLOB_VALUES = {
    'DatabaseServer': 'localhost',
    'DatabaseName': 'test_db',
    'DatabaseUsername': 'admin',
    'DatabasePassword': 'password123',
    'LogWebhookUri': 'https://example.com',
    'SendgridApiKey': 'sendgrid-api-key',
    'EmailFromName': 'Test',
    'EmailFromAddress': 'test@example.com',
    'EmailToAddresses': 'user1@example.com,user2@example.com',
}


@pytest.fixture
def blob_values():
    return dict(BLOB_VALUES)


@pytest.fixture
def blob(blob_values):
    return json.dumps(blob_values)


@pytest.fixture
def environ(blob):
    """Injected environment lookup carrying a valid settings blob."""
    return {'SecretBlob': blob}


def _make_settings(**overrides) -> Settings:
    values = dict(
        database_server='localhost',
        database_name='test_db',
        database_username='admin',
        database_password='password123',
        log_webhook_uri='http://example.com',
        sendgrid_api_key='sendgrid-api-key',
        email_from_name='Test',
        email_from_address='test@example.com',
        email_to_addresses='user1@example.com',
    )
    values.update(overrides)
    return Settings.from_fields(**values)


@pytest.fixture
def settings():
    return _make_settings(email_to_addresses='user1@example.com,user2@example.com')


@pytest.fixture(autouse=True)
def clear_redactor():
    yield
    get_redactor().clear()


@pytest.fixture
def make_settings():
    """Factory for Settings with per-test overrides."""
    return _make_settings


@pytest.fixture
def restore_root_logger():
    """Undo root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
