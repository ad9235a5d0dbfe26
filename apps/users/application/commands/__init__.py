"""User commands."""

from apps.users.application.commands.create_user import CreateUserInteractor
from apps.users.application.commands.rename_user import RenameUserInteractor

__all__ = ["CreateUserInteractor", "RenameUserInteractor"]
