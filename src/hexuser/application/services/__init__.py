from hexuser.application.services.user_service import UserService

__all__ = ["UserService"]
