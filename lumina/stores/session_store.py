import asyncio

from lumina.config.settings import settings
from lumina.errors import ValidationError
from lumina.models.identity import AuthMode, Credentials, Identity
from lumina.services.auth_service import CredentialVerifier, MockCredentialVerifier
from lumina.utils.logger import get_logger

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 6
MSG_MISSING_FIELDS = "모든 필드를 입력해주세요."
MSG_PASSWORD_TOO_SHORT = "비밀번호는 6자 이상이어야 합니다."


class SessionStore:
    """Holds at most one signed-in identity for the storefront."""

    def __init__(
        self,
        verifier: CredentialVerifier | None = None,
        delay_seconds: float | None = None,
    ):
        self._verifier = verifier or MockCredentialVerifier()
        self._delay_seconds = settings.login_delay_seconds if delay_seconds is None else delay_seconds
        self._current: Identity | None = None

    @property
    def current(self) -> Identity | None:
        return self._current.model_copy() if self._current else None

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    @property
    def is_admin(self) -> bool:
        return self._current is not None and self._current.is_admin

    @staticmethod
    def validate(credentials: Credentials, mode: AuthMode) -> None:
        if not credentials.email or not credentials.password or (mode is AuthMode.SIGN_UP and not credentials.name):
            raise ValidationError(MSG_MISSING_FIELDS)
        if len(credentials.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(MSG_PASSWORD_TOO_SHORT)

    async def login(self, credentials: Credentials, mode: AuthMode) -> Identity:
        mode = AuthMode(mode)
        try:
            self.validate(credentials, mode)
        except ValidationError as e:
            logger.info("login — rejected mode=%s email=%r: %s", mode.value, credentials.email, e.message)
            raise

        # Simulated network round-trip
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)

        identity = await self._verifier.verify(credentials, mode)
        self._current = identity
        logger.info("login — mode=%s email=%s role=%s", mode.value, identity.email, identity.role.value)
        return identity.model_copy()

    def logout(self, confirmed: bool) -> bool:
        """Clear the session only when the user confirmed. Returns True if cleared."""
        if not confirmed:
            logger.debug("logout — not confirmed, keeping session")
            return False
        if self._current is not None:
            logger.info("logout — email=%s", self._current.email)
        self._current = None
        return True
