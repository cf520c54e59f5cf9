"""
Data models for Athena schema structures.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnInfo:
    """Information about a table column."""

    name: str
    data_type: str | None = None
    nullable: bool = False


@dataclass(frozen=True)
class TableInfo:
    """Information about a table and its columns, in declaration order."""

    name: str
    columns: tuple[ColumnInfo, ...] = ()

    @property
    def column_names(self) -> list[str]:
        return [col.name for col in self.columns]
