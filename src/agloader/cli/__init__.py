"""Command-line interface for ag-loader."""
