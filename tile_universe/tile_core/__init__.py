"""
tile_core: Tile reassembly and motif detection.

Provides:
- types: Bitmap, Placement, Neighbors and table/grid aliases
- errors: TilingError hierarchy
- orientation: D4 transformations on square bitmaps
- tileset: validated, immutable tile collection
- adjacency: neighbor table by exact border matching
- corners: corner detection and checksum
- assembly: grid placement by walking the neighbor table
- merge: border stripping and image composition
- motif: motif search and roughness
- parse: text tile loader
- order_hash: deterministic fingerprints
- pipeline: end-to-end reassemble()
"""

from .errors import TilingError
from .pipeline import ReassemblyResult, reassemble

__all__ = ["ReassemblyResult", "TilingError", "reassemble"]
