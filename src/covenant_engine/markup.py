"""Inline sentinel tokens embedded in generated legal text.

Grammar::

    token     := "[" NAME ":" PAYLOAD "]"
    NAME      := "SIGNATURE_FIELD" | "CITATION"
    PAYLOAD   := label                      (SIGNATURE_FIELD)
               | title "|" source           (CITATION)

Tokens are plain text, never executable. Anything that does not match the
grammar, including unknown names and malformed payloads, is kept as literal
text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SIGNATURE_FIELD = "SIGNATURE_FIELD"
CITATION = "CITATION"

_TOKEN_RE = re.compile(r"\[([A-Z_]+):([^\[\]\n]*)\]")


@dataclass(slots=True, frozen=True)
class TextSegment:
    text: str


@dataclass(slots=True, frozen=True)
class SignatureField:
    label: str


@dataclass(slots=True, frozen=True)
class Citation:
    title: str
    source: str


Segment = TextSegment | SignatureField | Citation


def signature_field(label: str) -> str:
    return f"[{SIGNATURE_FIELD}:{label}]"


def citation_token(title: str, source: str) -> str:
    return f"[{CITATION}:{title}|{source}]"


def _token_segment(name: str, payload: str) -> Segment | None:
    if name == SIGNATURE_FIELD:
        label = payload.strip()
        return SignatureField(label) if label else None

    if name == CITATION:
        title, sep, source = payload.partition("|")
        if not sep or not title.strip() or not source.strip() or "|" in source:
            return None
        return Citation(title.strip(), source.strip())

    return None


def parse_markup(text: str) -> list[Segment]:
    segments: list[Segment] = []
    cursor = 0

    for match in _TOKEN_RE.finditer(text):
        token = _token_segment(match.group(1), match.group(2))
        if token is None:
            continue
        if match.start() > cursor:
            segments.append(TextSegment(text[cursor : match.start()]))
        segments.append(token)
        cursor = match.end()

    if cursor < len(text):
        segments.append(TextSegment(text[cursor:]))
    return segments


def render_plain(segments: list[Segment]) -> str:
    """Flatten parsed segments for plain-text consumers."""
    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, SignatureField):
            parts.append(f"{segment.label}: ______________________")
        elif isinstance(segment, Citation):
            parts.append(f"{segment.title} ({segment.source})")
        else:
            parts.append(segment.text)
    return "".join(parts)
