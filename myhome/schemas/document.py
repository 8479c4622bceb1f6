"""
House member document schemas.
"""

from __future__ import annotations

from myhome.schemas.base import BaseSchema

__all__ = ["HouseMemberDocumentRecord"]


class HouseMemberDocumentRecord(BaseSchema):
    document_filename: str
    document_content: bytes
