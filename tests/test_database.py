"""Tests for the SQL Server connection descriptor."""

import pytest
from pydantic import ValidationError

from login_checker.config.database import (
    DatabaseConfig, EncryptionLevel, DEFAULT_SQL_PORT, APPLICATION_NAME,
    to_database_config
)


def test_address(make_settings):
    config = to_database_config(make_settings())

    assert config.get_addr() == 'localhost:1433'
    assert config.address == 'localhost:1433'


def test_fields_from_settings(settings):
    config = to_database_config(settings)

    assert config.host == 'localhost'
    assert config.port == DEFAULT_SQL_PORT == 1433
    assert config.database == 'test_db'
    assert config.username == 'admin'
    assert config.password == 'password123'
    assert config.encryption is EncryptionLevel.OFF
    assert config.trust_server_certificate is True
    assert config.application_name == APPLICATION_NAME == 'Login Checker'


def test_empty_strings_pass_through(make_settings):
    config = to_database_config(make_settings(
        database_server='', database_name='', database_username='', database_password=''
    ))

    assert config.host == ''
    assert config.database == ''
    assert config.get_addr() == ':1433'


def test_password_not_in_repr(settings):
    assert 'password123' not in repr(to_database_config(settings))


def test_immutable(settings):
    config = to_database_config(settings)
    with pytest.raises(ValidationError):
        config.port = 1434


def test_port_range():
    with pytest.raises(ValidationError):
        DatabaseConfig(host='h', port=0, database='d', username='u', password='p')


def test_odbc_connection_string(settings):
    conn_str = to_database_config(settings).to_odbc_connection_string()

    assert conn_str == (
        'DRIVER={ODBC Driver 18 for SQL Server};'
        'SERVER=localhost,1433;'
        'DATABASE=test_db;'
        'UID=admin;'
        'PWD=password123;'
        'Encrypt=no;'
        'TrustServerCertificate=yes;'
        'APP=Login Checker;'
    )


def test_odbc_connection_string_encrypted():
    config = DatabaseConfig(
        host='db', database='d', username='u', password='p',
        encryption=EncryptionLevel.REQUIRED, trust_server_certificate=False,
    )
    conn_str = config.to_odbc_connection_string(driver='ODBC Driver 17 for SQL Server')

    assert conn_str.startswith('DRIVER={ODBC Driver 17 for SQL Server};SERVER=db,1433;')
    assert 'Encrypt=yes;' in conn_str
    assert 'TrustServerCertificate=no;' in conn_str
