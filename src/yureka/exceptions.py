"""Exception hierarchy for the Yureka UI command-line tool.

Every error the commands raise on purpose derives from ``YurekaError`` so the
CLI can report it and exit with a non-zero status.  Some of them are recovered
locally by the commands (an unknown component drops into interactive
selection, for example) and never reach the user as a failure.
"""

from __future__ import annotations

from pathlib import Path


class YurekaError(Exception):
    """Base class for all Yureka UI errors.

    ``hint`` carries the corrective action (usually a command to run) that is
    shown to the user under the error message.
    """

    def __init__(self, message: str, hint: str = "") -> None:
        self.hint = hint
        super().__init__(message)


class MissingPackageJsonError(YurekaError):
    """Raised when the working directory has no ``package.json``."""

    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(
            f"No package.json found in {root}.",
            hint="Run this command in your Next.js project root.",
        )


class UninitializedProjectError(YurekaError):
    """Raised when ``components/yureka-ui`` does not exist yet."""

    def __init__(self, library_dir: Path) -> None:
        self.library_dir = library_dir
        super().__init__(
            "Yureka UI is not initialized in this project.",
            hint='Run "npx yureka@latest init" first.',
        )


class UnknownComponentError(YurekaError):
    """Raised when an identifier is not part of the component catalog."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f'Component "{identifier}" is not available in Yureka UI.')


class NotInstalledError(YurekaError):
    """Raised when a component selected for removal is not installed."""

    def __init__(self, display_name: str) -> None:
        self.display_name = display_name
        super().__init__(
            f'Component "{display_name}" is not installed in your project.'
        )


class ComponentWriteError(YurekaError):
    """Raised when writing or deleting component files fails.

    The original ``OSError`` is chained as ``__cause__`` and also kept on
    ``cause`` for reporting.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class DependencyInstallError(YurekaError):
    """Raised when the package manager fails to install dependencies."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"{command} exited with code {returncode}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message, hint=f"Try running `{command}` manually.")
