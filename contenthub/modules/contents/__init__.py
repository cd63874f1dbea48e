"""Content domain exports."""

from .exceptions import ContentError, ContentNotFoundError, ContentPermissionError, ContentValidationError
from .models import Content, ContentCreateInput, ContentStats, ContentUpdateInput, SubjectSummary
from .service import DOCUMENT_KINDS, ContentService
from .slugs import slugify, slugify_subject

__all__ = [
    "DOCUMENT_KINDS",
    "Content",
    "ContentCreateInput",
    "ContentError",
    "ContentNotFoundError",
    "ContentPermissionError",
    "ContentService",
    "ContentStats",
    "ContentUpdateInput",
    "ContentValidationError",
    "SubjectSummary",
    "slugify",
    "slugify_subject",
]
