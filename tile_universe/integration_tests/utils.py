"""
Utility functions for reassembly runs.

Provides:
- Logging setup
- Receipt generation
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from tile_core.assembly import grid_layout
from tile_core.merge import render
from tile_core.order_hash import bitmap_hash, hash64
from tile_core.pipeline import ReassemblyResult


def get_fixtures_dir() -> Path:
    """Get the absolute path to the bundled test fixtures."""
    # tile_universe/integration_tests/utils.py -> tile_universe -> tests/fixtures
    return Path(__file__).parent.parent / "tests" / "fixtures"


def setup_logger(name: str, log_file: Path, level=logging.INFO) -> logging.Logger:
    """
    Setup logger for reassembly runs.

    Handlers are attached to the root logger as well so tile_core module
    loggers report through the same file and console.

    Args:
        name: Logger name
        log_file: Path to log file
        level: Logging level

    Returns:
        Configured logger
    """
    # Create logs directory if it doesn't exist
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # File handler
    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    # Formatter
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Close and drop handlers left by an earlier run
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    root.addHandler(file_handler)
    root.addHandler(console_handler)

    return logging.getLogger(name)


def build_receipt(
    input_name: str,
    result: Optional[ReassemblyResult] = None,
    status: str = "PASS",
    error: Optional[str] = None,
    include_image: bool = False,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one run.

    Args:
        input_name: Name of the tile file
        result: Pipeline result (None on failure)
        status: "PASS" or "FAIL"
        error: Error message if status is FAIL
        include_image: Embed the oriented image in text form

    Returns:
        Receipt dictionary
    """
    receipt = {
        "input": input_name,
        "timestamp": datetime.now().isoformat(),
        "status": status,
    }

    if result is not None:
        layout = grid_layout(result.grid)
        receipt["tiles"] = len(result.tileset)
        receipt["corners"] = result.corners
        receipt["checksum"] = result.checksum
        receipt["grid"] = layout
        receipt["grid_hash"] = hash64(layout)
        receipt["image_hash"] = bitmap_hash(result.image)
        receipt["motif"] = {
            "orientation": result.scan.orientation,
            "occurrences": result.scan.occurrences,
            "anchors": [list(anchor) for anchor in result.scan.anchors],
            "roughness": result.roughness,
        }
        if include_image:
            receipt["image"] = render(result.scan.image).splitlines()

    if error is not None:
        receipt["error"] = error

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> Path:
    """
    Save receipt to JSON file.

    Args:
        receipt: Receipt dictionary
        output_dir: Directory to save receipt (e.g., receipts/)

    Returns:
        Path of the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    receipt_file = output_dir / f"{Path(receipt['input']).stem}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)

    return receipt_file
