"""Output formatters for configdoc."""

from .markdown_formatter import MarkdownFormatter, generate_markdown

__all__ = [
    "MarkdownFormatter",
    "generate_markdown",
]
