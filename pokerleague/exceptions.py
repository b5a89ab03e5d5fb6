"""Exceptions raised by the poker league scoring engine."""


# ========== Base Exception ==========


class PokerLeagueError(Exception):
    """Base exception for all poker league scoring errors.

    Catch this to handle any failure raised by the package with a single
    except clause.
    """

    pass


# ========== Validation Exceptions ==========


class InvalidArgument(PokerLeagueError, ValueError):
    """Raised when a value object, entity or calculation gets invalid input.

    The message is a fixed, human-readable reason. Objects are never left
    half-built or half-mutated when this is raised.
    """

    pass


class UnknownStrategy(InvalidArgument):
    """Raised when a scoring strategy or game type has no registered scorer."""

    def __init__(self, message: str, name: str = '', available: list[str] | None = None):
        super().__init__(message)
        self.name = name
        self.available = list(available or [])
