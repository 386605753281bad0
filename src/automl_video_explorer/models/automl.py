"""AutoML records returned by the remote service.

These models are the local, framework-independent view of the service's
messages. They are built by the client adapter and consumed by the
renderers; nothing here is persisted.
"""

import math
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from automl_video_explorer.models.resource_names import (
    ModelEvaluationPath,
    ModelPath,
)

# Threshold of the headline metrics shown by display_evaluation.
DEFAULT_CONFIDENCE_THRESHOLD = 0.5

# Absolute tolerance used when matching confidence thresholds.
THRESHOLD_TOLERANCE = 1e-6


class DeploymentState(str, Enum):
    """Deployment state of a model."""

    DEPLOYMENT_STATE_UNSPECIFIED = "DEPLOYMENT_STATE_UNSPECIFIED"
    DEPLOYED = "DEPLOYED"
    UNDEPLOYED = "UNDEPLOYED"


class VideoClassificationModelMetadata(BaseModel):
    """Type-specific metadata marker for video classification models.

    The service exposes no tunable hyperparameters for this model type, so
    the marker carries no fields; its presence selects the model type.
    """

    model_config = ConfigDict(frozen=True)


class ModelDescriptor(BaseModel):
    """Description of a model to be trained by ``create_model``."""

    display_name: str = Field(
        min_length=1,
        description="Human-readable name of the new model",
    )
    dataset_id: str = Field(
        min_length=1,
        description="Id of the dataset the model is trained on",
    )
    video_classification_model_metadata: VideoClassificationModelMetadata = Field(
        default_factory=VideoClassificationModelMetadata,
        description="Empty marker selecting video classification",
    )


class Model(BaseModel):
    """A trained (or training) AutoML model.

    Attributes:
        name: Full resource name.
        display_name: Human-readable model name.
        dataset_id: Id of the dataset the model was trained on.
        metadata_kind: Name of the type-specific metadata field that is set,
            e.g. ``video_classification_model_metadata``.
        metadata: Contents of the type-specific metadata.
        create_time: When the model was created.
        update_time: When the model was last updated.
        deployment_state: Whether the model is deployed.
    """

    name: str
    display_name: str = ""
    dataset_id: str = ""
    metadata_kind: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    create_time: datetime | None = None
    update_time: datetime | None = None
    deployment_state: DeploymentState = DeploymentState.DEPLOYMENT_STATE_UNSPECIFIED

    @property
    def path(self) -> ModelPath:
        """The typed resource path of this model."""
        return ModelPath.parse(self.name)

    @property
    def resource_id(self) -> str:
        """The bare model id."""
        return self.path.resource_id


class ConfidenceMetricsEntry(BaseModel):
    """Classification metrics at a single confidence threshold."""

    confidence_threshold: float = 0.0
    precision: float = 0.0
    recall: float = 0.0
    f1_score: float = 0.0
    precision_at1: float = 0.0
    recall_at1: float = 0.0
    f1_score_at1: float = 0.0


class ClassificationEvaluationMetrics(BaseModel):
    """Evaluation metrics of a classification model."""

    au_prc: float = 0.0
    au_roc: float = 0.0
    log_loss: float = 0.0
    confidence_metrics_entries: list[ConfidenceMetricsEntry] = Field(
        default_factory=list
    )

    def entry_at(
        self,
        threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
        tolerance: float = THRESHOLD_TOLERANCE,
    ) -> ConfidenceMetricsEntry | None:
        """Return the entry whose threshold matches within ``tolerance``.

        Args:
            threshold: Confidence threshold to look up.
            tolerance: Maximum absolute difference accepted as a match.

        Returns:
            The first matching entry, or None if no entry matches.
        """
        for entry in self.confidence_metrics_entries:
            if math.isclose(
                entry.confidence_threshold, threshold, rel_tol=0.0, abs_tol=tolerance
            ):
                return entry
        return None


class ModelEvaluation(BaseModel):
    """Evaluation of a model, either overall or for one annotation spec."""

    name: str
    annotation_spec_id: str = ""
    display_name: str = ""
    evaluated_example_count: int = 0
    create_time: datetime | None = None
    classification_evaluation_metrics: ClassificationEvaluationMetrics = Field(
        default_factory=ClassificationEvaluationMetrics
    )

    @property
    def path(self) -> ModelEvaluationPath:
        """The typed resource path of this evaluation."""
        return ModelEvaluationPath.parse(self.name)

    @property
    def resource_id(self) -> str:
        """The bare evaluation id."""
        return self.path.resource_id

    @property
    def is_aggregate(self) -> bool:
        """Whether this evaluates the whole model rather than a single class."""
        return self.annotation_spec_id == ""


class AnyPayload(BaseModel):
    """A packed message: its type URL and serialized bytes."""

    type_url: str = ""
    value: bytes = b""


class OperationError(BaseModel):
    """Terminal error of a long-running operation."""

    code: int = 0
    message: str = ""


class OperationOutcome(str, Enum):
    """Where a long-running operation stands."""

    PENDING = "PENDING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class OperationStatus(BaseModel):
    """State of a long-running operation.

    A pending operation carries neither a response nor an error. A finished
    operation carries at most one of them: the service may finish an
    operation without sending a response.
    """

    name: str
    metadata: AnyPayload = Field(default_factory=AnyPayload)
    done: bool = False
    response: AnyPayload | None = None
    error: OperationError | None = None

    @model_validator(mode="after")
    def check_outcome(self) -> "OperationStatus":
        """Enforce the pending / succeeded / failed shapes."""
        if not self.done and (self.response is not None or self.error is not None):
            raise ValueError("a pending operation cannot carry a response or error")
        if self.response is not None and self.error is not None:
            raise ValueError("an operation cannot carry both a response and an error")
        return self

    @property
    def outcome(self) -> OperationOutcome:
        """Discriminate the three operation shapes."""
        if not self.done:
            return OperationOutcome.PENDING
        if self.error is not None:
            return OperationOutcome.FAILED
        return OperationOutcome.SUCCEEDED
