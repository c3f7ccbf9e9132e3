# articlehub/errors.py
"""
Error taxonomy shared by the image decoder, the store gateway and the
migration routine. Each error carries the HTTP status the API answers with.
"""

from __future__ import annotations


class ArticleHubError(Exception):
    status_code = 500

    def __init__(self, message: str | None = None):
        super().__init__(message or self.__class__.__doc__ or self.__class__.__name__)
        self.message = str(self.args[0])


class InvalidFormat(ArticleHubError):
    """Invalid image data format"""
    status_code = 400


class DecodeError(ArticleHubError):
    """Could not extract base64 data"""
    status_code = 400


class PrerequisiteMissing(ArticleHubError):
    """Default author not found. Please run the seed command first."""
    status_code = 400


class NotFound(ArticleHubError):
    """Record not found"""
    status_code = 404


class MigrationFailed(ArticleHubError):
    """Migration failed"""
    status_code = 500

    def __init__(self, cause: BaseException):
        super().__init__("Migration failed")
        self.cause = cause
