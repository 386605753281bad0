"""Domain models for AutoML resources."""

from automl_video_explorer.models.automl import (
    DEFAULT_CONFIDENCE_THRESHOLD,
    AnyPayload,
    ClassificationEvaluationMetrics,
    ConfidenceMetricsEntry,
    DeploymentState,
    Model,
    ModelDescriptor,
    ModelEvaluation,
    OperationError,
    OperationOutcome,
    OperationStatus,
    VideoClassificationModelMetadata,
)
from automl_video_explorer.models.resource_names import (
    LocationPath,
    ModelEvaluationPath,
    ModelPath,
    ResourcePath,
)

__all__ = [
    "DEFAULT_CONFIDENCE_THRESHOLD",
    "AnyPayload",
    "ClassificationEvaluationMetrics",
    "ConfidenceMetricsEntry",
    "DeploymentState",
    "LocationPath",
    "Model",
    "ModelDescriptor",
    "ModelEvaluation",
    "ModelEvaluationPath",
    "ModelPath",
    "OperationError",
    "OperationOutcome",
    "OperationStatus",
    "ResourcePath",
    "VideoClassificationModelMetadata",
]
