"""JSON envelope used by every endpoint."""

from __future__ import annotations

from fastapi.responses import JSONResponse


def ok(**data) -> dict:
    return {"success": True, **data}


def failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})
