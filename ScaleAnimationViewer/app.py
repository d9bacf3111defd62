"""Application entry point.

This module provides the main() function that initializes the Qt application
and displays the ImageViewer window.

Usage:
    python -m ScaleAnimationViewer.app [images...] [--verbose]

    # Or from Python:
    from ScaleAnimationViewer import main
    main()
"""

import argparse
import logging
import sys
from PySide6.QtWidgets import QApplication
from .ui.viewer import ImageViewer


def parse_args(argv):
    parser = argparse.ArgumentParser(prog="scale-animation-viewer", description="Image viewer with animated pinch zoom.")
    parser.add_argument("paths", nargs="*", help="Image files to open.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging.")
    # Qt consumes its own options from argv; ignore anything unknown here
    args, _ = parser.parse_known_args(argv[1:])
    return args


def main(argv=None):
    """Run the image viewer application.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code from QApplication.exec()
    """
    if argv is None:
        argv = sys.argv
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QApplication(argv)
    w = ImageViewer()
    w.show()
    # Open after show so the first image is fitted to the real viewport size
    if args.paths:
        w.add_images(args.paths)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
