"""Long-running operation commands."""

from automl_video_explorer.commands.operation.get import (
    GetOperationStatusCommand,
    GetOperationStatusRequest,
    GetOperationStatusResponse,
)
from automl_video_explorer.commands.operation.list import (
    ListOperationsStatusCommand,
    ListOperationsStatusRequest,
    ListOperationsStatusResponse,
)

__all__ = [
    "GetOperationStatusCommand",
    "GetOperationStatusRequest",
    "GetOperationStatusResponse",
    "ListOperationsStatusCommand",
    "ListOperationsStatusRequest",
    "ListOperationsStatusResponse",
]
