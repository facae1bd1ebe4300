"""
Response envelopes shared by every API view.

Success: ``{"success": true, "message": ..., "data": ...}``
Error:   ``{"error": ...}``
"""
from typing import Any
from rest_framework import status
from rest_framework.response import Response

_NO_DATA = object()


def success_response(message: str, data: Any = _NO_DATA, status_code: int = status.HTTP_200_OK) -> Response:
    """Build a success envelope; ``data`` is omitted when not given."""
    body = {"success": True, "message": message}
    if data is not _NO_DATA:
        body["data"] = data
    return Response(body, status=status_code)


def error_response(message: str, status_code: int) -> Response:
    return Response({"error": message}, status=status_code)
