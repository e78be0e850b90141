from .user import User, Gender

__all__ = ["User", "Gender"]
