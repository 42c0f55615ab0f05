"""
Exceptions for PyUpsample.

All errors raised by the upsamplers derive from UpsampleError, which carries a
main message and optional details. Input and magnitude validation errors also
derive from ValueError so callers catching the builtin keep working.
"""


class UpsampleError(Exception):
    """Base exception class for all upsampling errors."""

    def __init__(self, message: str, details: str = None):
        """
        Initialize the base exception.

        Args:
            message (str): Main error message
            details (str, optional): Additional error details/context
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class InvalidInputError(UpsampleError, ValueError):
    """Raised when the image is absent or is not a usable raster."""


class InvalidMagnitudeError(UpsampleError, ValueError):
    """Raised when the magnitude is rejected by an upsampler."""

    def __init__(self, message: str, magnitude=None, accepted: str = None):
        """
        Initialize InvalidMagnitudeError.

        Args:
            message (str): Main error message
            magnitude (optional): The rejected magnitude
            accepted (str, optional): Description of the accepted magnitudes
        """
        self.magnitude = magnitude
        self.accepted = accepted
        super().__init__(message, self._format_details())

    def _format_details(self) -> str:
        """Format the error details string."""
        parts = []
        if self.magnitude is not None:
            parts.append(f"Magnitude: {self.magnitude!r}")
        if self.accepted:
            parts.append(f"Accepted: {self.accepted}")
        return "\n".join(parts) if parts else None


__all__ = ["UpsampleError", "InvalidInputError", "InvalidMagnitudeError"]
