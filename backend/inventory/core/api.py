# backend/inventory/core/api.py
from __future__ import annotations
from typing import Any, Dict, Optional
from fastapi.responses import JSONResponse


# UTF-8 charset on every JSON response
class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


def ok(data: Any = True, message: Optional[str] = None, status_code: int = 200):
    payload: Dict[str, Any] = {"success": True, "data": data}
    if message:
        payload["message"] = message
    return UTF8JSONResponse(content=payload, status_code=status_code)


def created(data: Any, message: Optional[str] = None):
    return ok(data, message=message, status_code=201)


def fail(error: str, status_code: int = 400, message: Optional[str] = None):
    payload: Dict[str, Any] = {"success": False, "error": error}
    if message:
        payload["message"] = message
    return UTF8JSONResponse(content=payload, status_code=status_code)
