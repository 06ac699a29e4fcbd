"""
Main entry point for the Gradient Engine.
Launches the main frame, or renders a single frame to an image file.

    python -m src.main
    python -m src.main --preset "Ocean Deep"
    python -m src.main --snapshot out.png --size 1920x1080 --time 4.5
    python -m src.main --log-file
"""

import argparse
import sys
from pathlib import Path

import numpy as np
from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QImage, QSurfaceFormat

from src.config import OSC_RECEIVE_PORT, SNAPSHOT_DEFAULT_SIZE


def parse_size(text):
    """'1920x1080' -> (1920, 1080)."""
    try:
        width, height = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Size must look like WIDTHxHEIGHT, got {text!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Size must be positive, got {text!r}")
    return width, height


def build_parser():
    parser = argparse.ArgumentParser(prog="gradient-engine",
                                     description="Animated noise gradient background")
    parser.add_argument("--preset", help="preset to load at startup")
    parser.add_argument("--snapshot", metavar="PATH",
                        help="render one frame to an image file and exit")
    parser.add_argument("--size", type=parse_size,
                        default=SNAPSHOT_DEFAULT_SIZE, metavar="WxH",
                        help="snapshot size (default %(default)s)")
    parser.add_argument("--time", type=float, default=0.0, metavar="SECONDS",
                        help="animation time for the snapshot")
    parser.add_argument("--log-level", default="info", metavar="LEVEL",
                        help="console log level: debug, info, warning, error")
    parser.add_argument("--osc-port", type=int, default=OSC_RECEIVE_PORT, metavar="N",
                        help="UDP port for tilt and music OSC input")
    parser.add_argument("--log-file", nargs="?", const="", default=None, metavar="PATH",
                        help="also write a debug log to PATH (default: app state dir)")
    return parser


def set_default_surface_format():
    """GL 3.3 core, vsync on. Must run before the QApplication exists."""
    fmt = QSurfaceFormat()
    fmt.setVersion(3, 3)
    fmt.setProfile(QSurfaceFormat.CoreProfile)
    fmt.setSwapInterval(1)
    fmt.setDepthBufferSize(0)
    QSurfaceFormat.setDefaultFormat(fmt)


def enable_log_file(path):
    """Start the debug log file; an empty path means the app state dir."""
    from src.utils.app_paths import get_log_path
    from src.utils.logger import logger

    log_path = Path(path) if path else get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logger.enable_file_logging(str(log_path))
    logger.info(f"Logging to {log_path}", component="APP")
    return log_path


def save_snapshot(params, path, size, elapsed):
    """Render params on the CPU and write an image. Returns True on success."""
    from src.render.shading import render_frame
    from src.utils.logger import logger

    width, height = size
    pixels = render_frame(params, width, height, elapsed)
    data = (pixels * 255.0 + 0.5).astype(np.uint8).tobytes()
    image = QImage(data, width, height, width * 3, QImage.Format_RGB888).copy()
    if not image.save(path):
        logger.error(f"Could not write snapshot to {path}", component="APP")
        return False
    logger.info(f"Snapshot written: {path} ({width}x{height}, t={elapsed:g}s)", component="APP")
    return True


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Initialize logger first
    from src.utils.logger import logger, set_log_level, LogLevel

    try:
        set_log_level(LogLevel.from_name(args.log_level))
    except ValueError as e:
        logger.warning(str(e), component="APP")

    if args.log_file is not None:
        enable_log_file(args.log_file)

    from src.model.parameter_store import ParameterStore
    from src.presets import PresetManager

    store = ParameterStore(PresetManager())
    if args.preset and not store.load_preset(args.preset):
        logger.warning(f"Unknown preset: {args.preset}", component="APP")

    if args.snapshot:
        return 0 if save_snapshot(store.get(), args.snapshot, args.size, args.time) else 1

    logger.info("=" * 40, component="APP")
    logger.info("Gradient Engine starting", component="APP")
    logger.info("G = controls, I = interactive mode", component="APP")
    logger.info("=" * 40, component="APP")

    set_default_surface_format()
    app = QApplication(sys.argv[:1])

    from src.gui.main_frame import MainFrame

    window = MainFrame(store, osc_port=args.osc_port)
    window.show()

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
