"""Constant modules for ag-loader."""
