"""Exceptions raised by the crossy core."""


class CrossyError(Exception):
    """Base class for everything the core raises."""


class ConfigError(CrossyError, ValueError):
    pass


class GenerationExhaustedError(CrossyError, RuntimeError):
    """Rejection sampling could not place an occupant in a row."""

    def __init__(self, kind: str, attempts: int):
        super().__init__(
            f"could not place an occupant in a {kind} row after {attempts} attempts"
        )
        self.kind = kind
        self.attempts = attempts


class MissingVehicleError(CrossyError, RuntimeError):
    """A vehicle entry has no position; whoever built the row left it unplaced."""
