"""Shared fixtures: in-memory database, services and a recording notifier."""

from __future__ import annotations

import uuid
from datetime import timedelta
from typing import Any, List, Tuple

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from myhome.config.settings import TokenSettings
from myhome.core.security import JwtEncoderDecoder, PasswordHasher
from myhome.db.init_db import init_db
from myhome.db.session import create_session_factory
from myhome.models import User
from myhome.repositories import UserRepository
from myhome.services.amenity import AmenityService, BookingService
from myhome.services.auth import AuthenticationService, SecurityTokenService
from myhome.services.common import UnitOfWork
from myhome.services.community import CommunityService, HouseService
from myhome.services.payment import PaymentService
from myhome.services.user import UserService

TEST_SECRET = "test-secret-" + "x" * 64
DEFAULT_PASSWORD = "password123"


class RecordingNotifier:
    """Notifier double that records every call and returns ``result``."""

    def __init__(self, result: bool = True):
        self.result = result
        self.calls: List[Tuple[str, str, Any]] = []

    def send_account_created(self, user, email_confirm_token) -> bool:
        self.calls.append(("account_created", user.user_id, email_confirm_token.token))
        return self.result

    def send_account_confirmed(self, user) -> bool:
        self.calls.append(("account_confirmed", user.user_id, None))
        return self.result

    def send_password_recover_code(self, user, recover_code) -> bool:
        self.calls.append(("password_recover_code", user.user_id, recover_code))
        return self.result

    def send_password_successfully_changed(self, user) -> bool:
        self.calls.append(("password_changed", user.user_id, None))
        return self.result

    def of_kind(self, kind: str) -> List[Tuple[str, str, Any]]:
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = create_session_factory(engine)
    yield factory
    factory.remove()


@pytest.fixture
def token_settings() -> TokenSettings:
    return TokenSettings(
        secret=TEST_SECRET,
        algorithm="HS512",
        jwt_lifetime=timedelta(hours=1),
        reset_token_lifetime=timedelta(days=1),
        email_token_lifetime=timedelta(days=1),
    )


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def token_service(session_factory, token_settings) -> SecurityTokenService:
    return SecurityTokenService(session_factory, token_settings)


@pytest.fixture
def user_service(session_factory, hasher, token_service, notifier) -> UserService:
    return UserService(session_factory, hasher, token_service, notifier)


@pytest.fixture
def auth_service(session_factory, hasher, token_settings) -> AuthenticationService:
    return AuthenticationService(session_factory, hasher, JwtEncoderDecoder("HS512"), token_settings)


@pytest.fixture
def house_service(session_factory) -> HouseService:
    return HouseService(session_factory)


@pytest.fixture
def community_service(session_factory, house_service) -> CommunityService:
    return CommunityService(session_factory, house_service)


@pytest.fixture
def amenity_service(session_factory) -> AmenityService:
    return AmenityService(session_factory)


@pytest.fixture
def booking_service(session_factory) -> BookingService:
    return BookingService(session_factory)


@pytest.fixture
def payment_service(session_factory) -> PaymentService:
    return PaymentService(session_factory)


@pytest.fixture
def create_user(session_factory, hasher):
    """Persist a user directly and return it (detached, attributes loaded)."""

    def _create(
        email: str = "john@mail.com",
        name: str = "John",
        password: str = DEFAULT_PASSWORD,
        email_confirmed: bool = False,
    ) -> User:
        user = User(
            user_id=str(uuid.uuid4()),
            name=name,
            email=email,
            encrypted_password=hasher.hash(password),
            email_confirmed=email_confirmed,
        )
        with UnitOfWork(session_factory) as uow:
            uow.get_repo(UserRepository).save(user)
        return user

    return _create
