"""Commands for CLI operations."""

from automl_video_explorer.commands.evaluation import (
    DisplayEvaluationCommand,
    DisplayEvaluationRequest,
    DisplayEvaluationResponse,
    GetModelEvaluationCommand,
    GetModelEvaluationRequest,
    GetModelEvaluationResponse,
    ListModelEvaluationsCommand,
    ListModelEvaluationsRequest,
    ListModelEvaluationsResponse,
)
from automl_video_explorer.commands.model import (
    DEFAULT_MODEL_FILTER,
    CreateModelCommand,
    CreateModelRequest,
    CreateModelResponse,
    DeleteModelCommand,
    DeleteModelRequest,
    DeleteModelResponse,
    GetModelCommand,
    GetModelRequest,
    GetModelResponse,
    ListModelsCommand,
    ListModelsRequest,
    ListModelsResponse,
)
from automl_video_explorer.commands.operation import (
    GetOperationStatusCommand,
    GetOperationStatusRequest,
    GetOperationStatusResponse,
    ListOperationsStatusCommand,
    ListOperationsStatusRequest,
    ListOperationsStatusResponse,
)

__all__ = [
    "DEFAULT_MODEL_FILTER",
    "CreateModelCommand",
    "CreateModelRequest",
    "CreateModelResponse",
    "DeleteModelCommand",
    "DeleteModelRequest",
    "DeleteModelResponse",
    "DisplayEvaluationCommand",
    "DisplayEvaluationRequest",
    "DisplayEvaluationResponse",
    "GetModelCommand",
    "GetModelEvaluationCommand",
    "GetModelEvaluationRequest",
    "GetModelEvaluationResponse",
    "GetModelRequest",
    "GetModelResponse",
    "GetOperationStatusCommand",
    "GetOperationStatusRequest",
    "GetOperationStatusResponse",
    "ListModelEvaluationsCommand",
    "ListModelEvaluationsRequest",
    "ListModelEvaluationsResponse",
    "ListModelsCommand",
    "ListModelsRequest",
    "ListModelsResponse",
    "ListOperationsStatusCommand",
    "ListOperationsStatusRequest",
    "ListOperationsStatusResponse",
]
