"""
Tests for the command line entry point (snapshot mode only, no window).
"""

import argparse

import pytest

from src.main import build_parser, main, parse_size
from src.utils.logger import logger


@pytest.fixture
def state_dir(tmp_path, monkeypatch):
    """Point the app state dir at a temp dir and close any log file after."""
    path = tmp_path / "state"
    monkeypatch.setenv("GE_STATE_DIR", str(path))
    yield path
    logger.disable_file_logging()


class TestParseSize:

    def test_valid(self):
        assert parse_size("1920x1080") == (1920, 1080)
        assert parse_size("4X3") == (4, 3)

    @pytest.mark.parametrize("text", ["1920", "0x10", "axb", "-4x4"])
    def test_invalid(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_size(text)


class TestLogFileOption:

    def test_defaults_off(self):
        assert build_parser().parse_args([]).log_file is None

    def test_bare_flag_means_default_path(self):
        assert build_parser().parse_args(["--log-file"]).log_file == ""


class TestSnapshotMode:

    def test_writes_image_and_log_file(self, qapp, state_dir, tmp_path):
        image = tmp_path / "frame.png"
        log_file = tmp_path / "logs" / "run.log"
        code = main(["--snapshot", str(image), "--size", "4x4",
                     "--log-file", str(log_file)])
        logger.disable_file_logging()

        assert code == 0
        assert image.exists()
        assert log_file.exists()
        assert "Snapshot written" in log_file.read_text(encoding="utf-8")

    def test_log_file_defaults_to_state_dir(self, qapp, state_dir, tmp_path):
        code = main(["--snapshot", str(tmp_path / "frame.png"), "--size", "4x4", "--log-file"])
        logger.disable_file_logging()

        assert code == 0
        assert (state_dir / "gradient_engine.log").exists()

    def test_unknown_preset_still_renders(self, qapp, state_dir, tmp_path):
        image = tmp_path / "frame.png"
        assert main(["--preset", "Nope", "--snapshot", str(image), "--size", "4x4"]) == 0
        assert image.exists()
