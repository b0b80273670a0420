"""
Error taxonomy for tile reassembly.

Every failure is fatal and deterministic; callers catch TilingError to treat
any of them as "no solution".
"""


class TilingError(ValueError):
    """Base class for all reassembly failures."""


class MalformedTileError(TilingError):
    """Input bitmaps have inconsistent or invalid dimensions."""


class UnknownTileError(TilingError, KeyError):
    """Lookup of a tile id that is not in the tile set."""

    def __str__(self):
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidTilingError(TilingError):
    """The tiles cannot form a square grid (corner count, tile count)."""


class AmbiguousTilingError(InvalidTilingError):
    """More than one candidate neighbor for the same placement edge."""


class BrokenChainError(TilingError):
    """A required neighbor is missing while walking the grid."""


class MotifNotFoundError(TilingError):
    """No orientation of the composed image contains the motif."""


class MalformedMotifError(TilingError):
    """A motif definition has no pixels."""
