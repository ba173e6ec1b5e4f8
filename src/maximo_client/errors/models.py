"""Maximo OSLC error envelope models."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class MaximoErrorDetail:
    """Error object returned by the Maximo OSLC API.

    Maximo wraps failures in ``{"Error": {...}}`` (``oslc:Error`` when lean is
    off). Example:

        {"Error": {"reasonCode": "BMXAA4153E", "message": "BMXAA4153E - ...",
                   "statusCode": "404", "errorattrname": "wonum"}}
    """

    message: str | None = None
    reason_code: str | None = None
    status_code: str | None = None
    attribute: str | None = None  # errorattrname
    object_path: str | None = None  # errorobjpath

    # Remaining members of the error object
    extensions: dict[str, Any] | None = None

    ENVELOPE_KEYS = ("Error", "error", "oslc:Error")
    KNOWN_FIELDS = {"message", "reasonCode", "statusCode", "errorattrname", "errorobjpath"}

    @classmethod
    def from_body(cls, data: Any) -> "MaximoErrorDetail | None":
        """Parse the error envelope from a decoded body.

        Returns:
            MaximoErrorDetail or None if the body is not a Maximo error
        """
        if not isinstance(data, dict):
            return None

        error = None
        for key in cls.ENVELOPE_KEYS:
            if isinstance(data.get(key), dict):
                error = data[key]
                break
        if error is None:
            return None

        # Non-lean responses prefix members with "oslc:"
        error = {k.removeprefix("oslc:"): v for k, v in error.items()}
        if not any(field in error for field in cls.KNOWN_FIELDS):
            return None

        status_code = error.get("statusCode")
        extensions = {k: v for k, v in error.items() if k not in cls.KNOWN_FIELDS}

        return cls(
            message=error.get("message"),
            reason_code=error.get("reasonCode"),
            status_code=str(status_code) if status_code is not None else None,
            attribute=error.get("errorattrname"),
            object_path=error.get("errorobjpath"),
            extensions=extensions if extensions else None,
        )

    @classmethod
    def from_response(cls, response: httpx.Response) -> "MaximoErrorDetail | None":
        """Parse the error envelope from an HTTP response; None for non-JSON bodies."""
        try:
            data = response.json()
        except ValueError:
            return None
        return cls.from_body(data)

    def to_exception_message(self) -> str:
        """Convert the error object to an exception message."""
        parts = []

        if self.message:
            # Maximo messages usually start with the reason code already
            if self.reason_code and not self.message.startswith(self.reason_code):
                parts.append(f"{self.reason_code} - {self.message}")
            else:
                parts.append(self.message)
        elif self.reason_code:
            parts.append(self.reason_code)

        if self.attribute:
            parts.append(f"attribute={self.attribute}")
        if self.object_path:
            parts.append(f"object={self.object_path}")

        return " | ".join(parts) if parts else "Unknown Maximo error"
