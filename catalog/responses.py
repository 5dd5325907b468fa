# catalog/responses.py
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

# Uniform envelope: {"data": ...} on success, {"error": "..."} on failure.

def success(data: Any, status_code: int = 200) -> Response:
    if status_code == 204:
        return Response(status_code=204)
    return JSONResponse(status_code=status_code, content={"data": jsonable_encoder(data)})

def failure(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
