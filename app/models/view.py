"""
HR Dashboard - View Configuration
Transient sort/search state that derives a ranked view.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class SortField(Enum):
    """Fields a ranked view can be sorted by."""
    NAME = "name"
    EXPERIENCE = "experience"
    TOTAL = "total"
    CRISIS = "crisis"
    SUSTAINABILITY = "sustainability"
    MOTIVATION = "motivation"


class SortDirection(Enum):
    """Sort direction."""
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class ViewConfig:
    """
    View configuration for the leaderboard and heatmap.

    The leaderboard searches names and skills; the heatmap searches
    names only (search_skills=False).
    """

    sort_field: SortField = SortField.TOTAL
    sort_direction: SortDirection = SortDirection.DESC
    search: str = ""
    search_skills: bool = True
    limit: int = 10

    @classmethod
    def from_params(
        cls,
        sort: Optional[str] = None,
        direction: Optional[str] = None,
        search: Optional[str] = None,
        search_skills: bool = True,
        limit: int = 10
    ) -> "ViewConfig":
        """
        Build a config from raw request parameters.

        Raises:
            ValueError: If sort or direction is not a known value.
        """
        return cls(
            sort_field=SortField(sort.lower()) if sort else SortField.TOTAL,
            sort_direction=SortDirection(direction.lower()) if direction else SortDirection.DESC,
            search=search or "",
            search_skills=search_skills,
            limit=limit
        )

    def toggle_sort(self, field: SortField) -> "ViewConfig":
        """Clicking the active field flips direction; a new field starts descending."""
        if field is self.sort_field:
            return replace(self, sort_direction=self.sort_direction.flipped())
        return replace(self, sort_field=field, sort_direction=SortDirection.DESC)
