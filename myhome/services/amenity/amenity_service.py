# myhome/services/amenity/amenity_service.py
from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable, List, Optional

from sqlalchemy.orm import Session

from myhome.models import Amenity
from myhome.repositories import AmenityRepository, CommunityRepository
from myhome.schemas.amenity import AmenityCreate, AmenityRecord, AmenityUpdate
from myhome.services.common import UnitOfWork

logger = logging.getLogger(__name__)


class AmenityService:
    """
    Amenities belonging to a community.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def create_amenities(
        self, amenities: Iterable[AmenityCreate], community_id: str
    ) -> Optional[List[AmenityRecord]]:
        """Create amenities in the community, or return ``None`` if it does not exist."""
        with UnitOfWork(self._session_factory) as uow:
            community = uow.get_repo(CommunityRepository).find_by_community_id(community_id)
            if community is None:
                return None

            new_amenities = [
                Amenity(
                    amenity_id=str(uuid.uuid4()),
                    name=amenity.name,
                    description=amenity.description,
                    price=amenity.price,
                    community=community,
                )
                for amenity in amenities
            ]
            saved = uow.get_repo(AmenityRepository).save_all(new_amenities)
            logger.info(f"Created {len(saved)} amenity(ies) in community {community_id}")
            return [AmenityRecord.model_validate(amenity) for amenity in saved]

    def get_amenity_details(self, amenity_id: str) -> Optional[AmenityRecord]:
        with UnitOfWork(self._session_factory) as uow:
            amenity = uow.get_repo(AmenityRepository).find_by_amenity_id(amenity_id)
            return AmenityRecord.model_validate(amenity) if amenity is not None else None

    def delete_amenity(self, amenity_id: str) -> bool:
        with UnitOfWork(self._session_factory) as uow:
            amenity_repo = uow.get_repo(AmenityRepository)
            amenity = amenity_repo.find_by_amenity_id_with_community(amenity_id)
            if amenity is None:
                return False

            if amenity.community is not None:
                amenity.community.amenities.discard(amenity)
            amenity_repo.delete(amenity)
            logger.info(f"Amenity {amenity_id} deleted")
            return True

    def list_all_amenities(self, community_id: str) -> List[AmenityRecord]:
        with UnitOfWork(self._session_factory) as uow:
            community = uow.get_repo(CommunityRepository).find_by_community_id_with_amenities(
                community_id
            )
            if community is None:
                return []
            return [
                AmenityRecord.model_validate(amenity)
                for amenity in sorted(community.amenities, key=lambda a: a.id)
            ]

    def update_amenity(self, updated: AmenityUpdate) -> bool:
        """
        Replace the amenity's values and move it to the community named in
        the payload. Nothing is saved when either lookup fails.
        """
        with UnitOfWork(self._session_factory) as uow:
            amenity_repo = uow.get_repo(AmenityRepository)
            amenity = amenity_repo.find_by_amenity_id(updated.amenity_id)
            if amenity is None:
                return False

            community = uow.get_repo(CommunityRepository).find_by_community_id(updated.community_id)
            if community is None:
                return False

            amenity.name = updated.name
            amenity.description = updated.description
            amenity.price = updated.price
            amenity.community = community
            amenity_repo.save(amenity)
            logger.info(f"Amenity {updated.amenity_id} updated")
            return True
