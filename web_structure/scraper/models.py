# web_structure/scraper/models.py
"""
Data models for scrape results.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from web_structure.utils import iso_timestamp

__all__ = ("ExtractedValue", "PageResult", "ScrapedPage", "ALREADY_VISITED", "collapse")

#: One distinct match collapses to a plain string, anything else stays a list.
ExtractedValue = Union[str, List[str]]

ALREADY_VISITED = "Already visited"


def collapse(values: Sequence[str]) -> ExtractedValue:
    """Return the single value itself, or the values as a list when there are 0 or 2+."""
    if len(values) == 1:
        return values[0]
    return list(values)


class PageResult(BaseModel):
    """Result of one page plus the results of the children followed from it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    title: str
    data: Dict[str, ExtractedValue] = Field(default_factory=dict)
    timestamp: str = Field(default_factory=iso_timestamp)
    child_pages: Optional[List["PageResult"]] = Field(default=None, alias="childPages")

    @classmethod
    def already_visited(cls, url: str) -> "PageResult":
        return cls(url=url, title=ALREADY_VISITED)

    @property
    def is_revisit(self) -> bool:
        return self.title == ALREADY_VISITED and not self.data

    def with_children(self, children: Sequence["PageResult"]) -> "PageResult":
        """Copy with ``child_pages`` set and a fresh timestamp; an empty sequence leaves the field unset."""
        return self.model_copy(update={"child_pages": list(children) or None, "timestamp": iso_timestamp()})

    def iter_tree(self):
        """Depth-first walk over this result and all descendants."""
        yield self
        for child in self.child_pages or ():
            yield from child.iter_tree()

    def to_dict(self) -> Dict[str, Any]:
        """Wire format; ``childPages`` is omitted when there are no children."""
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(slots=True)
class ScrapedPage:
    """A page result together with the outgoing links found on that page."""

    result: PageResult
    links: List[str] = field(default_factory=list)
