# =============================================================================
# pixabay/models.py  —  Result, Descriptor and Error Types
# =============================================================================
#
# These are the "nouns" that cross the gateway boundary:
#   - ToolDescriptor: what a tool is called and what it accepts
#   - ToolResult:     what every tool call gives back (payload OR error text)
#   - PixabayError:   expected failures raised inside the package and turned
#                     into a ToolResult by the gateway before returning
#
# Every failure a caller can trigger ends up as a ToolResult whose text
# starts with "Error:".  Exceptions never reach the MCP layer for those.
# =============================================================================

import json
from dataclasses import dataclass, field
from typing import Any

ERROR_PREFIX = "Error: "


# -----------------------------------------------------------------------------
# ToolDescriptor — static metadata for one tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and JSON-schema parameters of a callable tool."""

    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


# -----------------------------------------------------------------------------
# ToolResult — the outcome of a single tool call
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolResult:
    """Serialized text returned to the caller.

    is_error is True when text carries an "Error: ..." message instead of
    the upstream JSON payload.
    """

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, payload: Any) -> "ToolResult":
        """Wrap an upstream JSON payload, pretty-printed with a 2-space indent."""
        return cls(text=json.dumps(payload, indent=2, ensure_ascii=False))

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=f"{ERROR_PREFIX}{message}", is_error=True)


# -----------------------------------------------------------------------------
# Expected failures
# -----------------------------------------------------------------------------
class PixabayError(Exception):
    """Base class for failures that become an error ToolResult."""


class ConfigurationError(PixabayError):
    """The API key is missing at call time."""


class UpstreamError(PixabayError):
    """Pixabay answered with a non-2xx status, bad JSON, or not at all."""
