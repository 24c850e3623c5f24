"""
Backdrop Admin error types — one class per failure the client can surface.
"""

from typing import Any, Optional


class BackdropAdminError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class InvalidAddressError(BackdropAdminError):
    def __init__(self, message: str = "Invalid site URL", details: Optional[dict[str, Any]] = None):
        super().__init__("invalid_address", message, details)


class LoginFailedError(BackdropAdminError):
    def __init__(self, message: str = "Login failed. Please check your credentials.",
                 details: Optional[dict[str, Any]] = None):
        super().__init__("login_failed", message, details)


class NotAuthenticatedError(BackdropAdminError):
    def __init__(self, message: str = "Not logged in"):
        super().__init__("not_authenticated", message)


class InvalidURLError(BackdropAdminError):
    def __init__(self, message: str = "Invalid URL"):
        super().__init__("invalid_url", message)


class InvalidResponseError(BackdropAdminError):
    def __init__(self, message: str = "Invalid response", details: Optional[dict[str, Any]] = None):
        super().__init__("invalid_response", message, details)


class HTTPStatusError(BackdropAdminError):
    def __init__(self, status_code: int):
        super().__init__("http_error", f"HTTP error: {status_code}", {"status_code": status_code})
        self.status_code = status_code


class ServerError(BackdropAdminError):
    """Error message reported by the CMS, either in an envelope or an error body."""

    def __init__(self, message: str, status_code: Optional[int] = None, server_code: Optional[int] = None):
        details = {"status_code": status_code, "server_code": server_code}
        super().__init__("server_error", message, details)
        self.status_code = status_code
        self.server_code = server_code


class TransportError(BackdropAdminError):
    def __init__(self, message: str):
        super().__init__("transport_error", message)
