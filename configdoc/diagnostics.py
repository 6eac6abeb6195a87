"""
Diagnostic log for documentation runs.

Scanning problems (orphaned fail-fast statements, unknown accessors) never stop
a run. They are logged through `logging` as they happen and can additionally be
written to a JSONL file for later review.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable

from configdoc.schemas import ScanDiagnostic


class DiagnosticLog:
    """Append scan diagnostics to a JSONL file."""

    def __init__(self, log_file: Path):
        """
        Initialize the diagnostic log.

        Args:
            log_file: Path to the JSONL file (created if missing)
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.log_file.touch(exist_ok=True)

        self.stats = {
            "diagnostics_logged": 0,
            "orphaned_statement": 0,
            "unrecognized_accessor": 0,
        }

    def log(self, diagnostic: ScanDiagnostic, variant: str = ""):
        """Append one diagnostic."""
        record = {
            "timestamp": datetime.now().isoformat(),
            "variant": variant,
            **diagnostic.model_dump(),
        }
        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write(json.dumps(record) + '\n')

        self.stats["diagnostics_logged"] += 1
        self.stats[diagnostic.kind] += 1

    def log_all(self, diagnostics: Iterable[ScanDiagnostic], variant: str = ""):
        """Append several diagnostics in order."""
        for diagnostic in diagnostics:
            self.log(diagnostic, variant)

    def get_stats(self) -> dict:
        """Get logging statistics."""
        return self.stats.copy()
