"""Exceptions raised by the verification framework."""


class VerificationError(Exception):
    """Raised when a verification in a chain does not hold."""
    pass


__all__ = [
    "VerificationError",
]
