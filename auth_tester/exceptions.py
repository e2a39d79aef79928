from typing import Optional, Dict, Any


class AuthTesterError(Exception):
    """Base exception for failed API calls"""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class TransportError(AuthTesterError):
    """Raised when the request never produced an HTTP response (connection refused, timeout, bad URL)"""
    def __init__(self, message: str = "Transport error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, None, details)


class ApiError(AuthTesterError):
    """Raised when the API answers with a non-2xx status"""
    def __init__(self, status_code: int, payload: Any = None, details: Optional[Dict[str, Any]] = None):
        self.payload = payload
        super().__init__(f"Request failed with status code {status_code}", status_code, details)


def handle_transport_error(error: Exception, operation: str = "request") -> TransportError:
    """Wrap a requests exception in a TransportError carrying the raw message"""
    import logging
    logger = logging.getLogger(__name__)
    logger.debug(f"Transport error during {operation}: {str(error)}", exc_info=True)

    return TransportError(
        message=str(error),
        details={"operation": operation, "error_type": error.__class__.__name__}
    )
