"""
Error types and helpers for consent payload decoding.
"""


class MalformedPayloadError(ValueError):
    """A recognised CMP cookie is present but its value cannot be decoded."""

    def __init__(self, vendor: str, cookie_name: str, reason: str) -> None:
        self.vendor = vendor
        self.cookie_name = cookie_name
        self.reason = reason
        super().__init__(f"{vendor} ({cookie_name}): {reason}")


def get_error_message(error: BaseException | object) -> str:
    """
    Safely extract an error message from an unknown error type.

    Falls back to the exception class name when the message is empty.
    """
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return "Unknown error"
