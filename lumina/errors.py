"""
Domain errors
─────────────
Everything here is local and recoverable; nothing is fatal to the process.

  • ValidationError   – bad form input (auth / admin forms), shown inline
  • InvalidArgument   – precondition violation on a store operation
  • PermissionDenied  – admin-only action attempted without the admin role
  • ChatProviderError – the generative-text provider failed; the chat session
                        turns it into an apology message, it never reaches HTTP

Absent ids on update/remove are NOT errors; stores treat them as no-ops.
"""


class LuminaError(Exception):
    status_code: int = 400

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(LuminaError):
    status_code = 400


class InvalidArgument(LuminaError):
    status_code = 400


class PermissionDenied(LuminaError):
    status_code = 403


class ChatProviderError(LuminaError):
    status_code = 502
