"""Domain-level exceptions.

Every failure carries the integer code reported to XML-RPC callers, so the
dispatcher can turn any of them into a fault without knowing which layer
raised it.
"""


class RpcError(Exception):
    """Base class for all errors that are reported to the caller."""

    code: int = 500

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class AuthenticationError(RpcError):
    """Bad credentials. The code is whatever the identity provider reports."""

    code = 403


class AuthorizationError(RpcError):
    """Authenticated, but missing the required capability."""

    code = 403


class EntityNotFoundError(RpcError):
    """A requested entity does not exist."""

    code = 404


class MethodNotAllowedError(RpcError):
    """The requested method is not one of the registered handlers."""

    code = 405


class ValidationError(RpcError):
    """A required parameter is missing or a value is not acceptable."""

    code = 500
