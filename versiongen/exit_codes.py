"""
Standard exit codes for versiongen.

Following Unix/POSIX conventions for command-line tools.
"""
from typing import Optional

# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors

# Application-specific exit codes (64-113 are typically available)
CONFIG_ERROR = 66        # git missing, not a repository, bad config file
DATA_ERROR = 70          # Malformed project file or version mismatch
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit code mappings for common exceptions
EXCEPTION_EXIT_CODES = {
    'FileNotFoundError': CONFIG_ERROR,
    'PermissionError': CONFIG_ERROR,
    'TimeoutError': CONFIG_ERROR,
    'ValueError': DATA_ERROR,
    'KeyError': DATA_ERROR,
    'JSONDecodeError': DATA_ERROR,
    'KeyboardInterrupt': INTERRUPTED,
}


def get_exit_code_for_exception(exc: BaseException) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        Appropriate exit code
    """
    if isinstance(exc, CommandError):
        return exc.exit_code
    return EXCEPTION_EXIT_CODES.get(exc.__class__.__name__, GENERAL_ERROR)


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class GitError(CommandError):
    """Raised when git is unavailable or the path is not a usable repository."""
    def __init__(self, message: str, stderr: Optional[str] = None):
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message, CONFIG_ERROR)
        self.stderr = stderr


class ConfigError(CommandError):
    """Raised when there's a configuration error."""
    def __init__(self, message: str):
        super().__init__(message, CONFIG_ERROR)


class ProjectFileError(CommandError):
    """Raised when Cargo.toml, setup.cfg or pyproject.toml can't be used."""
    def __init__(self, filename: str, message: str):
        super().__init__(f"{filename}: {message}", DATA_ERROR)
        self.filename = filename


class VersionMismatchError(CommandError):
    """Raised in strict mode when the tag disagrees with a project file."""
    def __init__(self, message: str):
        super().__init__(message, DATA_ERROR)
