"""Exceptions raised by tool handlers and the Linear provider."""


class ToolError(Exception):
    """Base class for failures reported back to the caller as an error envelope."""


class InvalidArgumentsError(ToolError):
    def __init__(self, tool: str, problems: list[str]) -> None:
        self.tool = tool
        self.problems = problems
        super().__init__(f"Invalid arguments for {tool}: {'; '.join(problems)}")


class NotFoundError(ToolError):
    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} {entity_id} not found")


class NormalizationError(ToolError):
    """An unexpected failure while assembling a view from remote data."""


class LinearAPIError(Exception):
    """The Linear GraphQL API answered with errors."""


class LinearNotFoundError(LinearAPIError):
    """The requested entity does not exist (or is not visible to this key)."""
