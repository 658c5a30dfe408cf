"""Exceptions raised by the poster workflow."""
from .schemas import Notification


ERROR_TITLE = "❌ Error"


class PosterError(Exception):
    """Base exception for poster generation errors"""
    def __init__(self, message: str, notification: Notification):
        self.message = message
        self.notification = notification
        super().__init__(self.message)


class InputError(PosterError):
    """Submission blocked before any network activity"""
    def __init__(self, message: str, description: str = "Please enter your OpenAI API key first"):
        super().__init__(
            message,
            Notification(kind="error", title=ERROR_TITLE, description=description),
        )


class RequestError(PosterError):
    """The image request failed or returned something unusable"""
    def __init__(self, message: str):
        super().__init__(
            message,
            Notification(
                kind="error",
                title=ERROR_TITLE,
                description="Sorry, an error occurred while generating the poster.",
            ),
        )
