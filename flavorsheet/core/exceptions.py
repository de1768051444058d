"""
Custom exceptions for FlavorSheet.

The extraction core never raises; these are used by the file, config and
output layers around it.
"""

class FlavorSheetError(Exception):
    """Base exception for FlavorSheet."""
    pass

class SourceReadError(FlavorSheetError):
    """Raised when the script source cannot be read."""
    pass

class ConfigError(FlavorSheetError):
    """Raised when configuration-related errors occur."""
    pass

class OutputError(FlavorSheetError):
    """Raised when the spreadsheet cannot be written."""
    pass
