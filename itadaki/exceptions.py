"""
Custom exception hierarchy for the Itadaki engine.

Contract violations signal a programming error upstream (bad index, bad
roll, malformed board). They are raised immediately and are not meant to be
caught by normal game flow.
"""


class ItadakiError(Exception):
    """Base exception for all engine errors."""


class ContractViolation(ItadakiError):
    """A caller broke an engine precondition."""


class InvalidPlayerError(ContractViolation, IndexError):
    """Player index does not refer to a player in the session."""


class InvalidTileError(ContractViolation, IndexError):
    """Tile index is outside the board."""


class InvalidRollError(ContractViolation, ValueError):
    """Roll is not a positive integer."""


class EmptyRosterError(ContractViolation):
    """Operation needs at least one player."""


class InvalidBoardError(ContractViolation, ValueError):
    """Board tiles are empty or not indexed 0..N-1."""


class RandomSourceExhausted(ItadakiError):
    """A scripted random source ran out of values."""
