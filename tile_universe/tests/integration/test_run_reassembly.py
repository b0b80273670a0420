"""
Integration tests for integration_tests/run_reassembly.py.

Covers:
- Exit status and printed numbers
- PASS / FAIL receipts, including unreadable input and motif files
- Logger setup replacing earlier handlers
"""

import json
import logging
from pathlib import Path

import pytest

import run_reassembly
from utils import setup_logger

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def run(tmp_path):
    """Invoke the runner with receipts and logs under tmp_path."""

    def _run(*extra):
        argv = [
            "--receipts-dir", str(tmp_path / "receipts"),
            "--log-file", str(tmp_path / "logs" / "run.log"),
            *extra,
        ]
        return run_reassembly.main(argv)

    yield _run

    for handler in logging.getLogger().handlers[:]:
        handler.close()
        logging.getLogger().removeHandler(handler)


class TestRunner:
    """Command-line runner."""

    def test_example(self, run, tmp_path, capsys):
        assert run("--input", str(FIXTURES / "example_tiles.txt")) == 0

        lines = capsys.readouterr().out.split()
        assert lines == [str(1951 * 3079 * 2971 * 1171), "273"]

        receipt = json.loads((tmp_path / "receipts" / "example_tiles.json").read_text())
        assert receipt["status"] == "PASS"
        assert receipt["corners"] == [1171, 1951, 2971, 3079]
        assert receipt["motif"]["roughness"] == 273
        assert receipt["motif"]["occurrences"] == 2
        assert len(receipt["grid"]) == 3

    def test_show_image(self, run, tmp_path):
        run("--input", str(FIXTURES / "example_tiles.txt"), "--show-image")
        receipt = json.loads((tmp_path / "receipts" / "example_tiles.json").read_text())
        assert len(receipt["image"]) == 24
        assert all(len(line) == 24 for line in receipt["image"])

    def test_log_written(self, run, tmp_path):
        run("--input", str(FIXTURES / "example_tiles.txt"))
        log = (tmp_path / "logs" / "run.log").read_text()
        assert "Checksum" in log
        assert "Corner tiles" in log

    def test_custom_motif_file(self, run, tmp_path):
        motif = tmp_path / "block.txt"
        motif.write_text("########\n" * 8)
        assert run("--input", str(FIXTURES / "example_tiles.txt"), "--motif", str(motif)) == 1

        receipt = json.loads((tmp_path / "receipts" / "example_tiles.json").read_text())
        assert receipt["status"] == "FAIL"
        assert "motif" in receipt["error"]

    def test_malformed_input(self, run, tmp_path):
        bad = tmp_path / "bad.txt"
        bad.write_text("Tile x:\n#.\n")
        assert run("--input", str(bad)) == 1

        receipt = json.loads((tmp_path / "receipts" / "bad.json").read_text())
        assert receipt["status"] == "FAIL"
        assert "tile ID line pattern" in receipt["error"]

    def test_empty_motif_file(self, run, tmp_path):
        motif = tmp_path / "empty.txt"
        motif.write_text("")
        assert run("--input", str(FIXTURES / "example_tiles.txt"), "--motif", str(motif)) == 1

        receipt = json.loads((tmp_path / "receipts" / "example_tiles.json").read_text())
        assert receipt["status"] == "FAIL"
        assert "at least one pixel" in receipt["error"]

    def test_missing_input_file(self, run, tmp_path):
        assert run("--input", str(tmp_path / "missing.txt")) == 1

        receipt = json.loads((tmp_path / "receipts" / "missing.json").read_text())
        assert receipt["status"] == "FAIL"
        assert "missing.txt" in receipt["error"]

    def test_missing_motif_file(self, run, tmp_path):
        missing = tmp_path / "nowhere.txt"
        assert run("--input", str(FIXTURES / "example_tiles.txt"), "--motif", str(missing)) == 1

        receipt = json.loads((tmp_path / "receipts" / "example_tiles.json").read_text())
        assert receipt["status"] == "FAIL"


class TestSetupLogger:
    """Repeated logger setup."""

    def test_previous_handlers_closed(self, tmp_path):
        root = logging.getLogger()
        saved = root.handlers[:]
        try:
            setup_logger("first", tmp_path / "first.log")
            first = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
            setup_logger("second", tmp_path / "second.log")

            assert len(first) == 1
            # FileHandler.close() drops its stream
            assert first[0].stream is None
            assert first[0] not in root.handlers
            assert len(root.handlers) == 2
        finally:
            for handler in root.handlers[:]:
                handler.close()
                root.removeHandler(handler)
            for handler in saved:
                root.addHandler(handler)
