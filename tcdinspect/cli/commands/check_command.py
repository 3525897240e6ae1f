#!/usr/bin/env python3
"""
tcdinspect CLI Commands - Check Command

Reports whether files carry the libtcd signature without running the decoder.
"""

from typing import Any

from ...core.format_detector import FormatDetector
from ..analysis_runner import render_json, write_output
from ..display import display_check_results
from .base import Command


class CheckCommand(Command):
    """Signature check for each file; exit 1 if any file is not recognised"""

    def __init__(self, context=None, detector: FormatDetector | None = None):
        super().__init__(context)
        self.detector = detector or FormatDetector()

    def execute(self, args: dict[str, Any]) -> int:
        reports = [self.detector.describe_file(f) for f in args.get("files") or ()]

        if args.get("output_json"):
            write_output(render_json(reports) + "\n", args.get("output"))
        else:
            display_check_results(reports)

        return 0 if all(report["recognized"] for report in reports) else 1
