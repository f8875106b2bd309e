"""
Session store tests: mock sign-up / sign-in rules, validation and logout.
"""
import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from lumina.errors import ValidationError
from lumina.models.identity import AuthMode, Credentials, Identity, Role
from lumina.services.auth_service import MockCredentialVerifier
from lumina.stores.session_store import MSG_MISSING_FIELDS, MSG_PASSWORD_TOO_SHORT, SessionStore


def _login(store: SessionStore, mode: AuthMode, **fields) -> Identity:
    return asyncio.run(store.login(Credentials(**fields), mode))


def test_admin_sign_in_grants_administrator_role():
    store = SessionStore(delay_seconds=0)
    identity = _login(store, AuthMode.SIGN_IN, email="admin@lumina.com", password="123456")
    assert identity.role is Role.ADMINISTRATOR
    assert identity.name == "Administrator"
    assert store.is_admin


def test_other_sign_in_is_customer_named_after_local_part():
    store = SessionStore(delay_seconds=0)
    identity = _login(store, AuthMode.SIGN_IN, email="jiwoo@example.com", password="secret1")
    assert identity.role is Role.CUSTOMER
    assert identity.name == "jiwoo"
    assert store.is_authenticated
    assert not store.is_admin


def test_admin_email_with_wrong_password_is_customer():
    store = SessionStore(delay_seconds=0)
    identity = _login(store, AuthMode.SIGN_IN, email="admin@lumina.com", password="wrong-pass")
    assert identity.role is Role.CUSTOMER


def test_sign_up_uses_supplied_name():
    store = SessionStore(delay_seconds=0)
    identity = _login(store, AuthMode.SIGN_UP, email="mina@example.com", password="secret1", name="김민아")
    assert identity.name == "김민아"
    assert identity.role is Role.CUSTOMER


def test_sign_up_with_admin_credentials_stays_customer():
    store = SessionStore(delay_seconds=0)
    identity = _login(store, AuthMode.SIGN_UP, email="admin@lumina.com", password="123456", name="관리자")
    assert identity.role is Role.CUSTOMER


@pytest.mark.parametrize("mode", [AuthMode.SIGN_IN, AuthMode.SIGN_UP])
def test_short_password_is_rejected_without_session(mode):
    store = SessionStore(delay_seconds=0)
    with pytest.raises(ValidationError) as exc_info:
        _login(store, mode, email="a@b.com", password="12345", name="짧은비번")
    assert exc_info.value.message == MSG_PASSWORD_TOO_SHORT
    assert store.current is None


@pytest.mark.parametrize(
    "mode, fields",
    [
        (AuthMode.SIGN_IN, {"email": "", "password": "secret1"}),
        (AuthMode.SIGN_IN, {"email": "a@b.com", "password": ""}),
        (AuthMode.SIGN_UP, {"email": "a@b.com", "password": "secret1", "name": ""}),
    ],
)
def test_missing_fields_are_rejected(mode, fields):
    store = SessionStore(delay_seconds=0)
    with pytest.raises(ValidationError) as exc_info:
        _login(store, mode, **fields)
    assert exc_info.value.message == MSG_MISSING_FIELDS
    assert not store.is_authenticated


def test_failed_login_keeps_previous_session():
    store = SessionStore(delay_seconds=0)
    _login(store, AuthMode.SIGN_IN, email="jiwoo@example.com", password="secret1")
    with pytest.raises(ValidationError):
        _login(store, AuthMode.SIGN_IN, email="other@example.com", password="123")
    assert store.current.email == "jiwoo@example.com"


def test_login_waits_for_configured_delay():
    store = SessionStore(delay_seconds=1.5)
    with patch("lumina.stores.session_store.asyncio.sleep", new=AsyncMock()) as sleep:
        _login(store, AuthMode.SIGN_IN, email="jiwoo@example.com", password="secret1")
    sleep.assert_awaited_once_with(1.5)


def test_logout_requires_confirmation():
    store = SessionStore(delay_seconds=0)
    _login(store, AuthMode.SIGN_IN, email="jiwoo@example.com", password="secret1")
    assert store.logout(confirmed=False) is False
    assert store.is_authenticated
    assert store.logout(confirmed=True) is True
    assert store.current is None


def test_custom_admin_credentials():
    verifier = MockCredentialVerifier(admin_email="boss@shop.kr", admin_password="hunter22")
    store = SessionStore(verifier=verifier, delay_seconds=0)
    assert _login(store, AuthMode.SIGN_IN, email="boss@shop.kr", password="hunter22").is_admin
    assert not _login(store, AuthMode.SIGN_IN, email="admin@lumina.com", password="123456").is_admin


def test_verifier_is_pluggable():
    verifier = AsyncMock()
    verifier.verify.return_value = Identity(name="외부", email="ext@sso.kr", role=Role.ADMINISTRATOR)
    store = SessionStore(verifier=verifier, delay_seconds=0)
    identity = _login(store, AuthMode.SIGN_IN, email="ext@sso.kr", password="whatever")
    assert identity.name == "외부"
    assert store.is_admin
    verifier.verify.assert_awaited_once()
