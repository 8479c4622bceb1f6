"""Tests for the re-entrant unit of work."""

import uuid

import pytest

from myhome.models import User
from myhome.repositories import UserRepository
from myhome.services.common import UnitOfWork


def _user(email: str) -> User:
    return User(
        user_id=str(uuid.uuid4()),
        name="Jane",
        email=email,
        encrypted_password="hash",
        email_confirmed=False,
    )


def _count_users(session_factory) -> int:
    with UnitOfWork(session_factory) as uow:
        return len(uow.get_repo(UserRepository).list_all())


class TestUnitOfWork:
    def test_commits_on_success(self, session_factory):
        with UnitOfWork(session_factory) as uow:
            uow.get_repo(UserRepository).save(_user("a@mail.com"))

        assert _count_users(session_factory) == 1

    def test_rolls_back_on_error(self, session_factory):
        with pytest.raises(RuntimeError):
            with UnitOfWork(session_factory) as uow:
                uow.get_repo(UserRepository).save(_user("a@mail.com"))
                raise RuntimeError("boom")

        assert _count_users(session_factory) == 0

    def test_nested_block_joins_outer_transaction(self, session_factory):
        with pytest.raises(RuntimeError):
            with UnitOfWork(session_factory) as outer:
                with UnitOfWork(session_factory) as inner:
                    assert inner.session is outer.session
                    assert not inner.is_outermost
                    inner.get_repo(UserRepository).save(_user("inner@mail.com"))
                raise RuntimeError("outer failure")

        assert _count_users(session_factory) == 0

    def test_nested_error_rolls_back_everything(self, session_factory):
        with pytest.raises(ValueError):
            with UnitOfWork(session_factory) as outer:
                outer.get_repo(UserRepository).save(_user("outer@mail.com"))
                with UnitOfWork(session_factory) as inner:
                    inner.get_repo(UserRepository).save(_user("inner@mail.com"))
                    raise ValueError("inner failure")

        assert _count_users(session_factory) == 0

    def test_repositories_are_cached(self, session_factory):
        with UnitOfWork(session_factory) as uow:
            assert uow.get_repo(UserRepository) is uow.get_repo(UserRepository)

    def test_get_repo_outside_context(self, session_factory):
        with pytest.raises(RuntimeError):
            UnitOfWork(session_factory).get_repo(UserRepository)

    def test_cannot_enter_twice(self, session_factory):
        uow = UnitOfWork(session_factory)
        with uow:
            with pytest.raises(RuntimeError):
                uow.__enter__()
