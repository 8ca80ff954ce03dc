"""
Exception hierarchy for content operations.
"""

from typing import Optional


class ContentError(Exception):
    """Base class for every error raised by the content layer."""


class QuotaExceededError(ContentError):
    def __init__(self, key: str, size: int, quota: int):
        super().__init__(f"Writing '{key}' would use {size} of {quota} available bytes")
        self.key = key
        self.size = size
        self.quota = quota


class RecordNotFoundError(ContentError):
    def __init__(self, key: str, record_id: str):
        super().__init__(f"No record '{record_id}' in '{key}'")
        self.key = key
        self.record_id = record_id


class DuplicateRecordError(ContentError):
    def __init__(self, key: str, record_id: str):
        super().__init__(f"Record '{record_id}' already exists in '{key}'")
        self.key = key
        self.record_id = record_id


class RecordInUseError(ContentError):
    def __init__(self, key: str, record_id: str):
        super().__init__(f"Record '{record_id}' in '{key}' is in use")
        self.key = key
        self.record_id = record_id


class PermissionDeniedError(ContentError):
    def __init__(self, permission: str, email: Optional[str] = None):
        super().__init__(f"{email or 'anonymous'} lacks {permission}")
        self.permission = permission
        self.email = email


class InvalidUploadError(ContentError):
    pass


class PageExistsError(ContentError):
    def __init__(self, page_url: str):
        super().__init__(f"Page already exists: {page_url}")
        self.page_url = page_url
