"""
Sorting utilities.

A sort is written as a column name, prefixed with ``-`` for descending order
(``-created_at``).
"""

from enum import Enum
from typing import Any, Dict, Optional

from sqlalchemy import asc, column, desc


class SortDirection(str, Enum):
    """
    Sort direction enum.

    Attributes:
        ASC: Ascending order
        DESC: Descending order
    """

    ASC = "asc"
    DESC = "desc"


class SortField:
    """
    Sort field definition.

    Attributes:
        field: Column name to sort by
        direction: Sort direction (asc or desc)
    """

    def __init__(self, field: str, direction: SortDirection = SortDirection.ASC):
        self.field = field
        self.direction = direction

    @classmethod
    def parse(cls, sort_string: str) -> "SortField":
        """
        Parse a sort string.

        Args:
            sort_string: Column name, optionally prefixed with ``-``

        Returns:
            SortField instance

        Examples:
            >>> SortField.parse("name")
            SortField(field='name', direction=SortDirection.ASC)
            >>> SortField.parse("-created_at")
            SortField(field='created_at', direction=SortDirection.DESC)
        """
        sort_string = sort_string.strip()
        if sort_string.startswith("-"):
            return cls(sort_string[1:].strip(), SortDirection.DESC)
        return cls(sort_string, SortDirection.ASC)

    def to_clause(self, model: Any = None) -> Optional[Any]:
        """
        Build the ORDER BY expression.

        With a model the mapped attribute is used and an unknown field yields
        None; without one the name is used as a (quoted) column reference.

        Args:
            model: Optional SQLAlchemy model class

        Returns:
            SQLAlchemy order expression, or None
        """
        if model is not None:
            target = getattr(model, self.field, None)
            if target is None:
                return None
        else:
            target = column(self.field)

        if self.direction == SortDirection.DESC:
            return desc(target)
        return asc(target)

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "direction": self.direction.value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortField):
            return NotImplemented
        return self.field == other.field and self.direction == other.direction

    def __str__(self) -> str:
        prefix = "-" if self.direction == SortDirection.DESC else ""
        return f"{prefix}{self.field}"

    def __repr__(self) -> str:
        return f"SortField(field='{self.field}', direction=SortDirection.{self.direction.name})"
