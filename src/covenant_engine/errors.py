from __future__ import annotations


class CovenantEngineError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(CovenantEngineError):
    """Raised when a checker receives input that violates its contract."""


class UnknownToolError(CovenantEngineError):
    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"unknown tool: {tool_name}")


class ToolNotEnabledError(CovenantEngineError):
    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"tool not enabled by policy gate: {tool_name}")


class ToolExecutionFailure(CovenantEngineError):
    def __init__(self, tool_name: str, cause: BaseException) -> None:
        self.tool_name = tool_name
        self.cause = cause
        super().__init__(f"tool execution failed: {tool_name}: {cause}")
