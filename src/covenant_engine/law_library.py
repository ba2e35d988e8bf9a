from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from covenant_engine.domain.statute import StatuteEntry

DEFAULT_CORPUS: tuple[StatuteEntry, ...] = (
    StatuteEntry(
        citation_key="UCC 3-104",
        title="Negotiable Instrument",
        source_citation="Uniform Commercial Code § 3-104",
        raw_text=(
            "(a) ...means an unconditional promise or order to pay a fixed amount of money, "
            "with or without interest or other charges described in the promise or order, "
            "if it: (1) is payable to bearer or to order at the time it is issued or first "
            "comes into possession of a holder; (2) is payable on demand or at a definite "
            "time; and (3) does not state any other undertaking or instruction..."
        ),
    ),
    StatuteEntry(
        citation_key="UCC 9-203",
        title="Attachment and Enforceability of Security Interest",
        source_citation="Uniform Commercial Code § 9-203",
        raw_text=(
            "(b) ...a security interest is enforceable against the debtor and third parties "
            "with respect to the collateral only if: (1) value has been given; (2) the "
            "debtor has rights in the collateral... and (3) one of the following conditions "
            "is met: (A) the debtor has authenticated a security agreement that provides a "
            "description of the collateral..."
        ),
    ),
    StatuteEntry(
        citation_key="UCC 2-201",
        title="Formal Requirements; Statute of Frauds",
        source_citation="Uniform Commercial Code § 2-201",
        raw_text=(
            "(1) a contract for the sale of goods for the price of $500 or more is not "
            "enforceable by way of action or defense unless there is some writing "
            "sufficient to indicate that a contract for sale has been made between the "
            "parties and signed by the party against whom enforcement is sought..."
        ),
    ),
    StatuteEntry(
        citation_key="FTC Credit Rule",
        title="Unfair Credit Practices",
        source_citation="16 CFR § 444.2",
        raw_text=(
            "(a) In connection with the extension of credit... it is an unfair act or "
            "practice... for a lender or retail installment seller... to take or receive "
            "from a consumer an obligation that: (1) Constitutes or contains a cognovit or "
            "confession of judgment (for other than purposes of executory process in the "
            "State of Louisiana)..."
        ),
    ),
)


class LawLibrary:
    """Read-only statute table.

    ``lookup`` matches case-insensitively in both directions: the query may
    contain a key ("see UCC 3-104(a)") or a key may contain the query ("3-104").
    Keys are scanned in corpus order and the first match wins.
    """

    def __init__(self, entries: Iterable[StatuteEntry] = DEFAULT_CORPUS) -> None:
        self._entries: tuple[StatuteEntry, ...] = tuple(entries)
        keys = [entry.citation_key.lower() for entry in self._entries]
        if len(set(keys)) != len(keys):
            raise ValueError("citation keys must be unique")

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(entry.citation_key for entry in self._entries)

    def lookup(self, query: str) -> StatuteEntry | None:
        needle = query.strip().lower()
        if not needle:
            return None

        for entry in self._entries:
            key = entry.citation_key.lower()
            if needle in key or key in needle:
                return entry
        return None

    def lookup_exact(self, key: str) -> StatuteEntry | None:
        needle = key.strip().lower()
        for entry in self._entries:
            if entry.citation_key.lower() == needle:
                return entry
        return None

    def citation_for(self, query: str, default: str) -> str:
        entry = self.lookup(query)
        if entry is None:
            return default
        return entry.source_citation


DEFAULT_LIBRARY = LawLibrary()


async def consult_statute(query: str, library: LawLibrary | None = None) -> dict[str, Any]:
    entry = (library or DEFAULT_LIBRARY).lookup(query)
    if entry is None:
        return {"found": False}
    return {
        "found": True,
        "title": entry.title,
        "text": entry.raw_text,
        "citation": entry.source_citation,
    }
