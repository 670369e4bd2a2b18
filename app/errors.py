"""HTTP errors raised by the gate, the permission rules and the routers.

Each one renders as ``{"success": false, "message": ...}`` through the
handler registered in ``app.main``.
"""
from fastapi import HTTPException


class Unauthorized(HTTPException):
    def __init__(self, message="Unauthorized"):
        super().__init__(status_code=401, detail=message)


class Forbidden(HTTPException):
    def __init__(self, message="Forbidden"):
        super().__init__(status_code=403, detail=message)


class NotFound(HTTPException):
    def __init__(self, message="Not found"):
        super().__init__(status_code=404, detail=message)


class BadRequest(HTTPException):
    def __init__(self, message="Bad request"):
        super().__init__(status_code=400, detail=message)


class Conflict(BadRequest):
    """Duplicate record; reported as 400 like any other bad request."""
