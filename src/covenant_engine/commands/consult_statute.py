from __future__ import annotations

from argparse import Namespace

from covenant_engine.commands.results import error_result
from covenant_engine.config import AppSettings
from covenant_engine.errors import InvalidArgumentError
from covenant_engine.law_library import DEFAULT_LIBRARY
from covenant_engine.types import CommandResult, CommandStatus


def run_consult_statute(args: Namespace, _: AppSettings) -> CommandResult:
    query = str(getattr(args, "query", "")).strip()
    if not query:
        return error_result("consult-statute", InvalidArgumentError("query is required"))

    entry = DEFAULT_LIBRARY.lookup(query)
    if entry is None:
        return CommandResult(
            command="consult-statute",
            status=CommandStatus.FAILED,
            details={
                "query": query,
                "found": False,
                "known_keys": list(DEFAULT_LIBRARY.keys),
            },
        )

    return CommandResult(
        command="consult-statute",
        status=CommandStatus.PASSED,
        details={"query": query, "found": True, "statute": entry.as_dict()},
    )
