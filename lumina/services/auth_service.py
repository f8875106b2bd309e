"""
Credential verification
───────────────────────
The session store delegates "who is this?" to a CredentialVerifier, so the
demo's mock rules can be swapped for a real identity backend without touching
the store or the routes.

MockCredentialVerifier is deliberately NOT secure: no hashing, no credential
store, and a configured administrator bypass for the demo dashboard.
"""
from typing import Protocol

from lumina.config.settings import settings
from lumina.models.identity import AuthMode, Credentials, Identity, Role
from lumina.utils.logger import get_logger

logger = get_logger(__name__)


class CredentialVerifier(Protocol):
    async def verify(self, credentials: Credentials, mode: AuthMode) -> Identity:
        ...


class MockCredentialVerifier:
    def __init__(self, admin_email: str | None = None, admin_password: str | None = None):
        self.admin_email = admin_email if admin_email is not None else settings.admin_email
        self.admin_password = admin_password if admin_password is not None else settings.admin_password

    async def verify(self, credentials: Credentials, mode: AuthMode) -> Identity:
        if mode is AuthMode.SIGN_UP:
            return Identity(name=credentials.name, email=credentials.email, role=Role.CUSTOMER)

        if credentials.email == self.admin_email and credentials.password == self.admin_password:
            logger.info("verify — administrator sign-in for %s", credentials.email)
            return Identity(name="Administrator", email=credentials.email, role=Role.ADMINISTRATOR)

        return Identity(
            name=credentials.email.split("@")[0],
            email=credentials.email,
            role=Role.CUSTOMER,
        )
