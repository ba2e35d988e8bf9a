from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class StatuteEntry:
    citation_key: str
    title: str
    source_citation: str
    raw_text: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "citation_key": self.citation_key,
            "title": self.title,
            "source_citation": self.source_citation,
            "raw_text": self.raw_text,
        }
