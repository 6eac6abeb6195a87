"""Extraction components: accessor classification, literal decoding, scanning and aggregation."""

from .key_classifier import classify_accessor
from .literal_decoder import decode_default, extract_constraints
from .line_scanner import LineScanner, ScannerState
from .aggregator import SchemaAggregator, aggregate_schema

__all__ = [
    "classify_accessor",
    "decode_default",
    "extract_constraints",
    "LineScanner",
    "ScannerState",
    "SchemaAggregator",
    "aggregate_schema",
]
