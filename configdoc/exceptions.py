"""Custom exceptions for configdoc."""


class ConfigDocError(Exception):
    """Base exception for documentation generation errors."""

    pass


class SourceReadError(ConfigDocError):
    """A source file could not be read or decoded."""

    pass


class OutputWriteError(ConfigDocError):
    """The generated document could not be written."""

    pass


class VariantError(ConfigDocError):
    """Unknown documentation variant or invalid variant definition."""

    pass
