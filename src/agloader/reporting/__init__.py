"""Terminal reporting for ag-loader."""

from .stdout import StdoutReporter

__all__ = ["StdoutReporter"]
