"""create-taujs exception classes."""

from enum import Enum

__all__ = [
    "CreateTaujsError",
    "DestinationExistsError",
    "ExecutableNotFoundError",
    "InstallError",
    "InvalidProjectNameError",
    "OperationCancelledError",
    "ValidationReason",
]


class ValidationReason(str, Enum):
    """Why a project name was rejected."""

    EMPTY_NAME = "empty_name"
    INVALID_CHARACTERS = "invalid_characters"


class CreateTaujsError(Exception):
    """Base exception for create-taujs related errors."""


class InvalidProjectNameError(CreateTaujsError, ValueError):
    """Raised when a project name fails validation."""

    messages = {
        ValidationReason.EMPTY_NAME: "Project name is required",
        ValidationReason.INVALID_CHARACTERS: (
            "Project name can only contain lowercase letters, numbers, hyphens, and underscores"
        ),
    }

    def __init__(self, reason: ValidationReason) -> None:
        """Initialize the exception.

        Args:
            reason: The validation rule the candidate name broke.
        """
        super().__init__(self.messages[reason])
        self.reason = reason


class OperationCancelledError(CreateTaujsError):
    """Raised when the user aborts the interactive prompts."""

    def __init__(self) -> None:
        super().__init__("Operation cancelled")


class DestinationExistsError(CreateTaujsError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory {path} already exists")
        self.path = path


class ExecutableNotFoundError(CreateTaujsError):
    """Raised when the package manager executable is not found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable {executable!r} not found.")


class InstallError(CreateTaujsError):
    """Raised when the package manager install command fails."""

    def __init__(self, command: list[str], return_code: int) -> None:
        super().__init__(f"Command {command!r} failed with return code {return_code}.")
        self.command = command
        self.return_code = return_code
