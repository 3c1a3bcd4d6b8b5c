"""Tool environments and the runner that drives them."""

from .docker import DockerEngine, image_tag
from .engine import (
    EnvironmentHandle,
    ExecutionResult,
    ToolBuildFailed,
    ToolEngine,
    ToolInvocation,
    ToolName,
)
from .runner import PASSTHROUGH_ENV, ToolRunner, passthrough_for

__all__ = [
    "DockerEngine",
    "EnvironmentHandle",
    "ExecutionResult",
    "PASSTHROUGH_ENV",
    "ToolBuildFailed",
    "ToolEngine",
    "ToolInvocation",
    "ToolName",
    "ToolRunner",
    "image_tag",
    "passthrough_for",
]
