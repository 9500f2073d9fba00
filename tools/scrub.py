# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""
Remove application (APPn), JPEG-extension (JPGn) and comment segments from a
JPEG image.

With no file, reads standard input and writes standard output. With a file,
writes the scrubbed image to standard output, or back over the file with -i.

Pipeline:
1. ImageSource (file or stdin)
2. Scrubber (drop metadata segments)
3. ByteSink (hold the result until the run succeeded)
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import tempfile
from typing import BinaryIO

from jpegscrub.caps import summarize_caps
from jpegscrub.element import CapsNegotiationError
from jpegscrub.errors import ScrubError
from jpegscrub.pipeline import Pipeline
from jpegscrub.scrubber import Scrubber
from jpegscrub.sink import ByteSink
from jpegscrub.source import ImageSource

logger = logging.getLogger("scrub")


def build_pipeline(args: argparse.Namespace, stdin: BinaryIO | None = None) -> Pipeline:
    if args.file is None:
        source = ImageSource(stream=stdin or sys.stdin.buffer)
    else:
        source = ImageSource(uri=args.file)
    return Pipeline([source, Scrubber(), ByteSink()])


def rewrite_in_place(path: str, data: bytes) -> None:
    """Replace `path` with `data`; the original survives if anything fails before the rename."""
    directory = os.path.dirname(os.path.abspath(path))
    mode = os.stat(path).st_mode & 0o7777
    fd, tmp_path = tempfile.mkstemp(prefix=".scrub-", dir=directory)
    try:
        with os.fdopen(fd, "wb") as file:
            file.write(data)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="scrub",
        description="Remove APPn, JPGn and COM segments from a JPEG image.",
    )
    parser.add_argument(
        "-i", dest="in_place", action="store_true", help="Overwrite the input file in place."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log what was removed to stderr."
    )
    parser.add_argument("file", nargs="?", help="JPEG file to scrub (default: standard input).")
    return parser.parse_args(argv)


def main(
    argv: list[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="scrub: %(message)s",
    )

    if args.in_place and args.file is None:
        print("[error] cannot overwrite standard input", file=sys.stderr)
        return 1

    pipeline = build_pipeline(args, stdin)
    sink = pipeline.elements[-1]
    try:
        output = pipeline.run()
    except (ScrubError, CapsNegotiationError, OSError) as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1

    if output is None:
        print("[error] no output produced", file=sys.stderr)
        return 1

    if sink.caps is not None:
        logger.info(summarize_caps(sink.caps, source=sink.buffer.meta.get("uri")))

    try:
        if args.in_place:
            rewrite_in_place(sink.buffer.meta["path"], output)
        else:
            out = stdout or sys.stdout.buffer
            out.write(output)
            out.flush()
    except OSError as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
