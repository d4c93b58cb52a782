"""
AppLens error types
"""
import json
from typing import Optional

from azure.core.exceptions import HttpResponseError


class AppLensError(HttpResponseError):
    """Raised when AppLens answers with a status other than 2xx or 304"""

    def __init__(self, response, message: Optional[str] = None, **kwargs):
        self.service_code: Optional[str] = None
        self.service_message: Optional[str] = None
        self.response_body: str = ""
        try:
            self.response_body = response.text()
            payload = json.loads(self.response_body)
        except (ValueError, TypeError, AttributeError):
            payload = None
        if isinstance(payload, dict):
            # Accept both {"error": {...}} and flat {"code": ..., "message": ...}
            detail = payload.get("error") if isinstance(payload.get("error"), dict) else payload
            self.service_code = detail.get("code")
            self.service_message = detail.get("message")

        if message is None:
            message = f"AppLens request failed with status {response.status_code}"
            if self.service_code or self.service_message:
                message += f": {self.service_code or ''} {self.service_message or ''}".rstrip()
            elif self.response_body:
                message += f": {self.response_body}"

        super().__init__(message=message, response=response, **kwargs)
