# myhome/dependencies.py
"""
Composition root: builds the service graph from settings.

Any outer layer (an HTTP app, a CLI or a script) obtains services here
instead of constructing them by hand.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional

from sqlalchemy.orm import Session

from myhome.config.settings import Settings, get_settings
from myhome.core.security import JwtEncoderDecoder, PasswordHasher
from myhome.db.session import get_session_factory
from myhome.services.amenity import AmenityService, BookingService
from myhome.services.auth import AuthenticationService, SecurityTokenService
from myhome.services.community import CommunityService, HouseService
from myhome.services.document import DocumentLimits, HouseMemberDocumentService
from myhome.services.mail import Notifier, create_notifier
from myhome.services.payment import PaymentService
from myhome.services.user import UserService


@dataclass(frozen=True)
class Services:
    users: UserService
    authentication: AuthenticationService
    security_tokens: SecurityTokenService
    communities: CommunityService
    houses: HouseService
    amenities: AmenityService
    bookings: BookingService
    payments: PaymentService
    documents: HouseMemberDocumentService


def build_services(
    settings: Settings,
    session_factory: Callable[[], Session],
    *,
    notifier: Optional[Notifier] = None,
    password_hasher: Optional[PasswordHasher] = None,
) -> Services:
    """
    Wire every service against one session factory.

    ``session_factory`` should be thread-scoped (see ``create_session_factory``)
    so services calling each other share a transaction.
    """
    token_settings = settings.token_settings
    hasher = password_hasher or PasswordHasher(rounds=settings.PASSWORD_BCRYPT_ROUNDS)
    notifier = notifier or create_notifier(settings)

    security_tokens = SecurityTokenService(session_factory, token_settings)
    houses = HouseService(session_factory)
    return Services(
        users=UserService(session_factory, hasher, security_tokens, notifier),
        authentication=AuthenticationService(
            session_factory,
            hasher,
            JwtEncoderDecoder(token_settings.algorithm),
            token_settings,
        ),
        security_tokens=security_tokens,
        communities=CommunityService(session_factory, houses),
        houses=houses,
        amenities=AmenityService(session_factory),
        bookings=BookingService(session_factory),
        payments=PaymentService(session_factory),
        documents=HouseMemberDocumentService(
            session_factory, DocumentLimits.from_settings(settings)
        ),
    )


@lru_cache()
def get_services() -> Services:
    """Services wired from environment settings and the default database."""
    return build_services(get_settings(), get_session_factory())
