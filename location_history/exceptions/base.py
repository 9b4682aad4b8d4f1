from typing import Any, Dict, Optional


class LocationHistoryError(Exception):
    """Base exception for all location history errors.

    Every error knows the HTTP status it is reported with and how to render
    its user-facing body, so the Lambda boundary maps failures without
    inspecting their type.

    Attributes:
        message: Human-readable message returned to the caller
        original_error: The exception that caused this error (if any)
        context: Diagnostic details for logs; never returned to the caller
    """

    status_code = 500

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(message)

    def to_response_body(self) -> Dict[str, Any]:
        """User-facing JSON body for this error."""
        return {'message': self.message}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} (Context: {context_str})"
