from myhome.services.user.user_service import UserService

__all__ = ["UserService"]
