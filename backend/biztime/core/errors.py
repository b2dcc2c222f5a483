"""Error taxonomy for the BizTime API.

Every error the API reports is one of three kinds and serializes to the same
envelope::

    {"error": {"code": ..., "status": ..., "message": ...}, "message": ...}
"""

from typing import Any


class BizTimeError(Exception):
    code = "INTERNAL_ERROR"
    status = 500

    def __init__(self, message: str, status: int | None = None, details: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status
        self.details = details

    def to_response(self) -> dict[str, Any]:
        error: dict[str, Any] = {
            "code": self.code,
            "status": self.status,
            "message": self.message,
        }
        if self.details:
            error["details"] = self.details
        return {"error": error, "message": self.message}


class NotFoundError(BizTimeError):
    code = "NOT_FOUND"
    status = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class ValidationError(BizTimeError):
    code = "VALIDATION_ERROR"
    status = 422

    def __init__(self, message: str = "Invalid request data", details: list[dict[str, Any]] | None = None):
        super().__init__(message, details=details)


class InternalError(BizTimeError):
    code = "INTERNAL_ERROR"
    status = 500

    def __init__(self, message: str = "Internal error"):
        super().__init__(message)
