from evault.models.user import User
from evault.models.file import FileRecord

__all__ = ["User", "FileRecord"]
