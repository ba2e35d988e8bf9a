from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from covenant_engine.checkers.ordinary import PrecedentTable
from covenant_engine.config import AppSettings, get_settings
from covenant_engine.errors import ToolNotEnabledError, UnknownToolError
from covenant_engine.law_library import DEFAULT_LIBRARY, LawLibrary
from covenant_engine.orchestration.executor import RunContext, ToolExecutor
from covenant_engine.orchestration.ledger import AuditLedger
from covenant_engine.orchestration.policy_gate import ToolCallRecord
from covenant_engine.tools import tool_declarations


class ToolCallRequest(BaseModel):
    arguments: dict[str, Any] = Field(default_factory=dict)
    history: list[Any] = Field(default_factory=list)


class HistoryRequest(BaseModel):
    history: list[Any] = Field(default_factory=list)


def _history_item(item: object) -> object:
    if isinstance(item, ToolCallRecord):
        return item.as_dict()
    return item


def build_engine_app(
    settings: AppSettings,
    ledger: AuditLedger | None = None,
    library: LawLibrary = DEFAULT_LIBRARY,
) -> FastAPI:
    app = FastAPI(title=f"{settings.engine_name}-api", version="0.1.0")
    shared_ledger = ledger or AuditLedger()
    precedents = PrecedentTable(settings.law_db_endpoint)
    executor = ToolExecutor()

    @app.get("/livez")
    async def livez() -> dict[str, str]:
        return {"status": "ok", "engine": settings.engine_name}

    @app.get("/readyz")
    async def readyz() -> dict[str, Any]:
        return {
            "status": "ready",
            "engine": settings.engine_name,
            "statutes": list(library.keys),
            "law_db_endpoint": precedents.endpoint,
        }

    @app.get("/tools")
    async def list_tools() -> list[dict[str, Any]]:
        return tool_declarations([])

    @app.post("/tools/offered")
    async def offered(request: HistoryRequest) -> list[dict[str, Any]]:
        return tool_declarations(request.history)

    @app.post("/tools/{tool_name}")
    async def invoke_tool(tool_name: str, request: ToolCallRequest) -> dict[str, Any]:
        run = RunContext(
            ledger=shared_ledger,
            library=library,
            precedents=precedents,
            necessity_threshold=settings.necessity_threshold,
            history=list(request.history),
        )
        try:
            outcome = await executor.invoke(run, tool_name, request.arguments)
        except UnknownToolError as exc:
            raise HTTPException(status_code=404, detail=exc.message) from exc
        except ToolNotEnabledError as exc:
            raise HTTPException(status_code=409, detail=exc.message) from exc

        return {
            "run_id": run.run_id,
            "outcome": outcome.as_dict(),
            "history": [_history_item(item) for item in run.history],
        }

    @app.get("/ledger")
    async def read_ledger() -> list[dict[str, Any]]:
        return [entry.as_dict() for entry in shared_ledger.entries()]

    @app.delete("/ledger")
    async def reset_ledger() -> list[dict[str, Any]]:
        shared_ledger.reset()
        return [entry.as_dict() for entry in shared_ledger.entries()]

    return app


def default_engine_app() -> FastAPI:
    return build_engine_app(get_settings())
