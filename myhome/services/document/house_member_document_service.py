# myhome/services/document/house_member_document_service.py
"""
Identity documents attached to house members.

Uploads are decoded as images and stored as JPEG:
- below the compression border they are re-encoded at the default quality
- at or above it they are recompressed with the configured quality
- results at or above the maximum size are rejected
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from sqlalchemy.orm import Session

from myhome.config.settings import Settings
from myhome.models import HouseMember, HouseMemberDocument
from myhome.repositories import HouseMemberRepository
from myhome.schemas.document import HouseMemberDocumentRecord
from myhome.services.common import UnitOfWork
from myhome.utils.image_utils import ImageProcessor

logger = logging.getLogger(__name__)

KILOBYTE = 1024


@dataclass(frozen=True)
class DocumentLimits:
    compression_border_kbytes: int = 99
    max_size_kbytes: int = 1024
    compressed_image_quality: float = 0.5

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentLimits":
        return cls(
            compression_border_kbytes=settings.FILES_COMPRESSION_BORDER_SIZE_KBYTES,
            max_size_kbytes=settings.FILES_MAX_SIZE_KBYTES,
            compressed_image_quality=settings.FILES_COMPRESSED_IMAGE_QUALITY,
        )


class HouseMemberDocumentService:
    def __init__(
        self,
        session_factory: Callable[[], Session],
        limits: Optional[DocumentLimits] = None,
    ) -> None:
        self._session_factory = session_factory
        self._limits = limits or DocumentLimits()

    def find_house_member_document(self, member_id: str) -> Optional[HouseMemberDocumentRecord]:
        with UnitOfWork(self._session_factory) as uow:
            member = uow.get_repo(HouseMemberRepository).find_by_member_id_with_document(member_id)
            if member is None or member.house_member_document is None:
                return None
            return HouseMemberDocumentRecord.model_validate(member.house_member_document)

    def create_house_member_document(
        self, content: bytes, member_id: str
    ) -> Optional[HouseMemberDocumentRecord]:
        return self._store_document(content, member_id)

    def update_house_member_document(
        self, content: bytes, member_id: str
    ) -> Optional[HouseMemberDocumentRecord]:
        """Same as create: the new document replaces any existing one."""
        return self._store_document(content, member_id)

    def delete_house_member_document(self, member_id: str) -> bool:
        with UnitOfWork(self._session_factory) as uow:
            member_repo = uow.get_repo(HouseMemberRepository)
            member = member_repo.find_by_member_id_with_document(member_id)
            if member is None or member.house_member_document is None:
                return False

            member.house_member_document = None
            member_repo.save(member)
            logger.info(f"Document of member {member_id} deleted")
            return True

    def _store_document(self, content: bytes, member_id: str) -> Optional[HouseMemberDocumentRecord]:
        with UnitOfWork(self._session_factory) as uow:
            member_repo = uow.get_repo(HouseMemberRepository)
            member = member_repo.find_by_member_id_with_document(member_id)
            if member is None:
                return None

            document = self._try_create_document(content, member)
            if document is None:
                return None

            if member.house_member_document is not None:
                # orphaned document is deleted on flush, freeing the one-to-one slot
                member.house_member_document = None
                member_repo.save(member)
            member.house_member_document = document
            member_repo.save(member)
            return HouseMemberDocumentRecord.model_validate(document)

    def _try_create_document(self, content: bytes, member: HouseMember) -> Optional[HouseMemberDocument]:
        try:
            image = ImageProcessor.open_image(content)
        except ValueError as e:
            logger.warning(f"Document for member {member.member_id} rejected: {e}")
            return None

        if len(content) < self._limits.compression_border_kbytes * KILOBYTE:
            jpeg = ImageProcessor.to_jpeg_bytes(image)
        else:
            quality = ImageProcessor.quality_from_fraction(self._limits.compressed_image_quality)
            jpeg = ImageProcessor.to_jpeg_bytes(image, quality=quality)

        if len(jpeg) >= self._limits.max_size_kbytes * KILOBYTE:
            logger.warning(
                f"Document for member {member.member_id} rejected: "
                f"{len(jpeg)} bytes exceeds {self._limits.max_size_kbytes} KB"
            )
            return None

        return HouseMemberDocument(
            document_filename=f"member_{member.member_id}_document.jpg",
            document_content=jpeg,
        )
