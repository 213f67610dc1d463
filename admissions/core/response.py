"""
Response helpers

Standard envelopes for messages and errors
"""
from typing import Any, Optional
from pydantic import BaseModel


class MessageResponse(BaseModel):
    """
    Plain message response
    
    Example:
        {
            "success": true,
            "code": 200,
            "message": "Admission data successfully wiped",
            "data": null
        }
    """
    success: bool = True
    code: int = 200
    message: str = "OK"
    data: Optional[Any] = None


class DictResponse(MessageResponse):
    """Message response carrying a dict payload"""
    data: Optional[dict] = None


def success_response(
    data: Any = None,
    message: str = "OK",
    code: int = 200
) -> dict:
    """Success envelope"""
    return {
        "success": True,
        "code": code,
        "message": message,
        "data": data
    }


def error_response(
    message: Any = "Request failed",
    code: int = 400,
    data: Any = None
) -> dict:
    """Error envelope"""
    return {
        "success": False,
        "code": code,
        "message": message,
        "data": data
    }
