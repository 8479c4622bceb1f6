from myhome.services.auth.authentication_service import AuthenticationService
from myhome.services.auth.security_token_service import SecurityTokenService

__all__ = ["AuthenticationService", "SecurityTokenService"]
