#!/usr/bin/env python3
"""
Dump the debugging inspector output of the sample scene as text.

Runs the same render pass as the editor window, but through a
RecordingLayout, and prints the recorded widget tree. Useful for checking
what the inspector shows without opening a window.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from debug_inspector import (  # noqa: E402
    EditorContext,
    EditorHost,
    EditorRegistry,
    Inspector,
    RecordingLayout,
    create_default_registry,
    register_debugging_inspector,
)
from debug_inspector.config.settings import configure_logging  # noqa: E402
from debug_inspector.samples import build_sample_scene  # noqa: E402

logger = logging.getLogger("dump_inspection")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--frames", type=int, default=1, help="Frames to simulate before dumping (default: 1)")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="Frame time in seconds (default: 1/60)")
    parser.add_argument(
        "--no-auto-refresh",
        action="store_true",
        help="Disable auto refresh; only the first frame is repainted",
    )
    parser.add_argument("--samples", type=int, default=3, help="Number of sample objects (default: 3)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    layout = RecordingLayout()
    inspector = Inspector(create_default_registry(layout), layout)
    scene, debugging_inspector = build_sample_scene(args.samples)

    host = EditorHost(register_debugging_inspector(EditorRegistry()), EditorContext(scene, inspector))
    editor = host.select(debugging_inspector)
    editor.auto_refresh = not args.no_auto_refresh

    for frame in range(max(1, args.frames)):
        scene.update(args.dt)
        if not host.needs_repaint:
            logger.debug("Frame %d: no repaint needed", frame)
            continue

        layout.clear()
        host.repaint()
        print(f"=== Frame {frame} ===")
        print(layout.format_records())

    return 0


if __name__ == "__main__":
    sys.exit(main())
