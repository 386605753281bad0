"""Model evaluation commands."""

from automl_video_explorer.commands.evaluation.display import (
    DisplayEvaluationCommand,
    DisplayEvaluationRequest,
    DisplayEvaluationResponse,
)
from automl_video_explorer.commands.evaluation.get import (
    GetModelEvaluationCommand,
    GetModelEvaluationRequest,
    GetModelEvaluationResponse,
)
from automl_video_explorer.commands.evaluation.list import (
    ListModelEvaluationsCommand,
    ListModelEvaluationsRequest,
    ListModelEvaluationsResponse,
)

__all__ = [
    "DisplayEvaluationCommand",
    "DisplayEvaluationRequest",
    "DisplayEvaluationResponse",
    "GetModelEvaluationCommand",
    "GetModelEvaluationRequest",
    "GetModelEvaluationResponse",
    "ListModelEvaluationsCommand",
    "ListModelEvaluationsRequest",
    "ListModelEvaluationsResponse",
]
