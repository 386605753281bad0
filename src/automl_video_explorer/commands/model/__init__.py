"""Model commands."""

from automl_video_explorer.commands.model.create import (
    CreateModelCommand,
    CreateModelRequest,
    CreateModelResponse,
)
from automl_video_explorer.commands.model.delete import (
    DeleteModelCommand,
    DeleteModelRequest,
    DeleteModelResponse,
)
from automl_video_explorer.commands.model.get import (
    GetModelCommand,
    GetModelRequest,
    GetModelResponse,
)
from automl_video_explorer.commands.model.list import (
    DEFAULT_MODEL_FILTER,
    ListModelsCommand,
    ListModelsRequest,
    ListModelsResponse,
)

__all__ = [
    "DEFAULT_MODEL_FILTER",
    "CreateModelCommand",
    "CreateModelRequest",
    "CreateModelResponse",
    "DeleteModelCommand",
    "DeleteModelRequest",
    "DeleteModelResponse",
    "GetModelCommand",
    "GetModelRequest",
    "GetModelResponse",
    "ListModelsCommand",
    "ListModelsRequest",
    "ListModelsResponse",
]
