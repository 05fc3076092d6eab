"""Models for Mux API error bodies."""

from dataclasses import dataclass, field

import httpx


@dataclass
class ErrorDetail:
    """Error body returned by the Mux API.

    The API reports failures as ``{"error": {"type": ..., "messages": [...]}}``.
    """

    type: str | None = None  # e.g. "invalid_parameters", "not_found"
    messages: list[str] = field(default_factory=list)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorDetail | None":
        """Parse the Mux error envelope from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorDetail object or None if the body is not a Mux error envelope
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            return None

        if not isinstance(data, dict):
            return None

        error = data.get("error")
        if not isinstance(error, dict):
            return None

        messages = error.get("messages") or []
        if isinstance(messages, str):
            messages = [messages]

        return cls(type=error.get("type"), messages=[str(m) for m in messages])

    def to_exception_message(self, status_code: int) -> str:
        """Convert the error body to an exception message."""
        head = f"HTTP {status_code}"
        if self.type:
            head += f" ({self.type})"
        if not self.messages:
            return head
        return f"{head}: " + "; ".join(self.messages)
