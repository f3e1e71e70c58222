"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Services raise these directly at the point a rule is violated; the HTTP
layer lets FastAPI render them, while direct callers (tests, scripts)
catch them like any other exception.

Usage:
    from people_registry.utils.exceptions import InvalidArgumentError, NullArgumentError
    raise NullArgumentError("PersonAddRequest is required")
    raise InvalidArgumentError("Country name already exists")
"""

from fastapi import HTTPException, status


class InvalidArgumentError(HTTPException):
    """400 Bad Request 예외 — 요청 값이 비즈니스 규칙을 위반할 때 사용.

    400 Bad Request exception.
    Raised when a required field is missing or empty, a referenced id does
    not resolve to an existing record, or a uniqueness rule is violated.

    Args:
        detail: 오류 메시지 (Error message, default: "Invalid argument")
    """

    def __init__(self, detail: str = "Invalid argument") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NullArgumentError(InvalidArgumentError):
    """요청 객체 자체가 없을 때 사용하는 400 예외.

    Raised when the top-level request object is absent (None).
    Subclass of InvalidArgumentError, so callers catching the broader
    error also catch this one.

    Args:
        detail: 오류 메시지 (Error message, default: "Request is required")
    """

    def __init__(self, detail: str = "Request is required") -> None:
        super().__init__(detail=detail)


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Used by the HTTP layer when a by-id lookup or delete finds nothing;
    services themselves report absence with None/False.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
