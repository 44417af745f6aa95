"""Error type and error-message formatting shared by the whole game."""

from __future__ import annotations

import sys

ERROR_HEADER = "Error"
EXIT_FAILURE = 1

MSG_ARGS = "Usage: cubcaster mapfile.cub"
MSG_ARG_EXTENSION = "The map file must end with '.cub'"
MSG_MAP_OPEN = "Couldn't open map file"
MSG_MAP_CLOSE = "Couldn't close map file"
MSG_DIRECTORY = "The provided path is a directory"
MSG_WINDOW_INIT = "Couldn't initiate the window"
MSG_MAP_BAD = "Bad formatted map file"
MSG_PNG_SIZE = "Wrong texture size"
MSG_MAP_CHAR = "Invalid map character"
MSG_MEMORY = "Unable to allocate enought memory"
MSG_NO_PLAYER = "There's no player on the map"
MSG_MULTIPLAYER = "There's more than one player on the map"
MSG_MULTIDEFINE = "Some element(s) defined more than once"
MSG_AFTER_MAP = "There should be ABSOLUTELY nothing after the map"


def format_error(message: str, detail: str | None) -> str:
    """Return the text printed for an error: a header line, then the message.

    When ``detail`` is given (a system or library reason), it follows the
    message on the same line, separated by a colon.
    """
    body = message if detail is None else f"{message}: {detail}"
    return f"{ERROR_HEADER}\n{body}\n"


class CubError(Exception):
    """A fatal problem with the arguments, the scene file or the window."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    @classmethod
    def from_os_error(cls, message: str, exc: OSError) -> "CubError":
        """Build an error whose detail is the operating system's reason."""
        return cls(message, exc.strerror or str(exc))

    def __str__(self) -> str:
        if self.detail is None:
            return self.message
        return f"{self.message}: {self.detail}"

    def report(self) -> int:
        """Write the formatted error to standard error and return the exit status."""
        sys.stderr.write(format_error(self.message, self.detail))
        sys.stderr.flush()
        return EXIT_FAILURE