"""
Line scanner for configuration accessor calls.

Walks a source file line by line and recognises:
- Optional reads:  CFG->GetMaybeBool("map.lua")
- Required reads:  CFG->GetString("bot.name", 1, 15, "Aura Bot")
- Fail-fast marks: CFG->FailIfErrorLast();
- Reload sections: // == SECTION START: Cannot be reloaded == ... // == SECTION END ==
- Strict mode:     CFG.SetStrictMode(true); ... CFG.SetStrictMode(wasStrict);

Every accessor call must fit on one line; calls split across lines are not
recognised. State (section, strict mode, last key) never leaves the file it
was set in.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional
import logging

from configdoc.schemas import (
    FileScanResult,
    KeyMetadata,
    ReloadMode,
    ScanDiagnostic,
    SchemaEntry,
)
from configdoc.variants import DocVariant

logger = logging.getLogger(__name__)

LINE_SPLIT_PATTERN = re.compile(r'\r?\n')

SECTION_START_MARKER = "// == SECTION START: Cannot be reloaded =="
SECTION_END_MARKER = "// == SECTION END =="


@dataclass
class ScannerState:
    """Parser state for the file currently being scanned."""
    in_section: bool = False
    strict_mode: bool = False
    last_key_name: Optional[str] = None
    line_number: int = 0


class LineScanner:
    """
    Extract schema entries from source files of one documentation variant.

    A scanner instance holds only the compiled patterns for its variant; all
    per-file state lives in a ScannerState that is created for each call to
    scan_text().
    """

    def __init__(self, variant: DocVariant):
        """
        Initialize the scanner.

        Args:
            variant: Variant whose receiver spelling and reload rules apply
        """
        self.variant = variant

        separators = "|".join(re.escape(sep) for sep in variant.separators)
        receiver = re.escape(variant.receiver)

        self.optional_pattern = re.compile(
            rf'{receiver}(?:{separators})(GetMaybe[a-zA-Z0-9]+)\("([^"]+)"'
        )
        self.required_pattern = re.compile(
            rf'{receiver}(?:{separators})(Get[a-zA-Z0-9]+)\("([^"]+)", ([^)]+)\)'
        )

        spellings = variant.receiver_spellings()
        self.fail_fast_statements = {f"{s}FailIfErrorLast()" for s in spellings}
        self.strict_on_statements = {f"{s}SetStrictMode(true)" for s in spellings}
        self.strict_off_statements = {
            f"{s}SetStrictMode({arg})" for s in spellings for arg in ("wasStrict", "false")
        }

        self._rules: List[Callable[[ScannerState, str, FileScanResult], bool]] = [
            self._match_optional,
            self._match_required,
            self._match_fail_fast,
            self._match_section_start,
            self._match_section_end,
            self._match_strict_on,
            self._match_strict_off,
        ]

    def scan_text(self, text: str, source_file: str) -> FileScanResult:
        """
        Scan the full text of one source file.

        Args:
            text: File content
            source_file: Path of the file as listed in the variant

        Returns:
            FileScanResult with entries in line order and per-key metadata
        """
        result = FileScanResult(source_file=source_file)
        state = ScannerState()

        for line in LINE_SPLIT_PATTERN.split(text):
            state.line_number += 1
            self._process_line(state, line.strip(), result)

        result.lines_scanned = state.line_number
        logger.debug(
            f"Scanned {source_file}: {len(result.entries)} entries, "
            f"{len(result.metadata)} keys, {len(result.diagnostics)} diagnostics"
        )
        return result

    def _process_line(self, state: ScannerState, line: str, result: FileScanResult) -> None:
        # First matching rule wins; unmatched lines leave the state alone
        for rule in self._rules:
            if rule(state, line, result):
                return

    # ------------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------------

    def _match_optional(self, state: ScannerState, line: str, result: FileScanResult) -> bool:
        match = self.optional_pattern.search(line)
        if not match:
            return False

        accessor_name, key_name = match.group(1), match.group(2)
        self._record_entry(state, result, accessor_name, key_name, None)

        if state.strict_mode and self.variant.strict_applies_to_optional:
            self._metadata(result, key_name).fail_on_error = True
        return True

    def _match_required(self, state: ScannerState, line: str, result: FileScanResult) -> bool:
        match = self.required_pattern.search(line)
        if not match:
            return False

        accessor_name, key_name, rest_args = match.group(1), match.group(2), match.group(3)
        self._record_entry(state, result, accessor_name, key_name, rest_args)

        metadata = self._metadata(result, key_name)
        if state.in_section:
            metadata.reload_mode = ReloadMode.NOT_RELOADABLE
        elif result.source_file in self.variant.session_scoped_files:
            metadata.reload_mode = ReloadMode.NEXT_SESSION
        elif result.source_file in self.variant.instant_reload_files:
            metadata.reload_mode = ReloadMode.INSTANT

        if state.strict_mode:
            metadata.fail_on_error = True
        return True

    def _match_fail_fast(self, state: ScannerState, line: str, result: FileScanResult) -> bool:
        if not self._is_statement(line, self.fail_fast_statements):
            return False

        if state.last_key_name is None:
            message = (
                f"Fail-fast statement without a preceding config read "
                f"at {result.source_file}:{state.line_number}"
            )
            logger.warning(message)
            result.diagnostics.append(ScanDiagnostic(
                kind="orphaned_statement",
                message=message,
                source_file=result.source_file,
                line_number=state.line_number,
            ))
            self._metadata(result, "").fail_on_error = True
            return True

        self._metadata(result, state.last_key_name).fail_on_error = True
        return True

    def _match_section_start(self, state: ScannerState, line: str, result: FileScanResult) -> bool:
        if line != SECTION_START_MARKER:
            return False
        state.in_section = True
        return True

    def _match_section_end(self, state: ScannerState, line: str, result: FileScanResult) -> bool:
        if line != SECTION_END_MARKER:
            return False
        state.in_section = False
        return True

    def _match_strict_on(self, state: ScannerState, line: str, result: FileScanResult) -> bool:
        if not self._is_statement(line, self.strict_on_statements):
            return False
        state.strict_mode = True
        return True

    def _match_strict_off(self, state: ScannerState, line: str, result: FileScanResult) -> bool:
        if not self._is_statement(line, self.strict_off_statements):
            return False
        state.strict_mode = False
        return True

    # ------------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------------

    def _record_entry(
        self,
        state: ScannerState,
        result: FileScanResult,
        accessor_name: str,
        key_name: str,
        rest_args: Optional[str]
    ) -> None:
        result.entries.append(SchemaEntry(
            key_name=key_name,
            accessor_name=accessor_name,
            raw_default_args=rest_args,
            source_file=result.source_file,
            line_number=state.line_number,
        ))
        state.last_key_name = key_name
        self._metadata(result, key_name)

    @staticmethod
    def _metadata(result: FileScanResult, key_name: str) -> KeyMetadata:
        if key_name not in result.metadata:
            result.metadata[key_name] = KeyMetadata()
        return result.metadata[key_name]

    @staticmethod
    def _is_statement(line: str, statements: set) -> bool:
        """Exact statement match; the trailing semicolon is optional."""
        if line.endswith(";"):
            line = line[:-1].rstrip()
        return line in statements
