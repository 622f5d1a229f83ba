"""Core data models for ag-loader."""

from .entities import CategoryEntry, EmitOptions, EmitReport, SkillDocument, StackTree, WrittenFile

__all__ = [
    "CategoryEntry",
    "EmitOptions",
    "EmitReport",
    "SkillDocument",
    "StackTree",
    "WrittenFile",
]
