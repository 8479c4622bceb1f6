# myhome/repositories/security_token_repository.py
from typing import Optional

from sqlalchemy.orm import Session

from myhome.models import SecurityToken
from myhome.repositories.base import BaseRepository


class SecurityTokenRepository(BaseRepository[SecurityToken]):
    def __init__(self, session: Session):
        super().__init__(session, SecurityToken)

    def find_by_token(self, token: str) -> Optional[SecurityToken]:
        stmt = self._base_select().where(SecurityToken.token == token)
        return self.session.execute(stmt).scalar_one_or_none()
