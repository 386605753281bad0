"""Model evaluation display command.

Shows the headline metrics of a model: the overall evaluation (the one not
tied to an annotation spec) at a single confidence threshold.
"""

from pydantic import BaseModel, Field

from automl_video_explorer.core.errors import NotFoundError
from automl_video_explorer.models import (
    DEFAULT_CONFIDENCE_THRESHOLD,
    ConfidenceMetricsEntry,
)
from automl_video_explorer.services import ModelManagementService


class DisplayEvaluationRequest(BaseModel):
    """Request model for displaying the overall evaluation of a model."""

    model_id: str = Field(description="Bare id of the model")
    filter_expression: str = Field(
        default="",
        description="Filter applied when listing the model's evaluations",
    )
    threshold: float = Field(
        default=DEFAULT_CONFIDENCE_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Confidence threshold of the metrics to show",
    )

    model_config = {"protected_namespaces": ()}


class DisplayEvaluationResponse(BaseModel):
    """Response model for display-evaluation command."""

    evaluation_id: str = Field(description="Bare id of the overall evaluation")
    threshold: float = Field(description="Confidence threshold shown")
    entry: ConfidenceMetricsEntry = Field(
        description="Metrics at the requested threshold",
    )


class DisplayEvaluationCommand:
    """Command to display the overall evaluation of a model."""

    def __init__(self, service: ModelManagementService) -> None:
        """Initialize the command."""
        self.service = service

    def execute(self, request: DisplayEvaluationRequest) -> DisplayEvaluationResponse:
        """Execute the display-evaluation command.

        The overall evaluation is located in the listing and then fetched by
        its path, so the metrics shown are the service's latest.

        Args:
            request: Model id, listing filter and threshold.

        Returns:
            Response with the evaluation id and the metrics at the threshold.

        Raises:
            NotFoundError: If the model has no overall evaluation, or the
                evaluation has no metrics at the threshold.
        """
        aggregate = self.service.find_aggregate_evaluation(
            request.model_id, request.filter_expression
        )
        evaluation = self.service.get_model_evaluation(
            request.model_id, aggregate.resource_id
        )

        metrics = evaluation.classification_evaluation_metrics
        entry = metrics.entry_at(request.threshold)
        if entry is None:
            raise NotFoundError(
                f"Evaluation '{evaluation.resource_id}' has no metrics at "
                f"confidence threshold {request.threshold:g}"
            )

        return DisplayEvaluationResponse(
            evaluation_id=evaluation.resource_id,
            threshold=request.threshold,
            entry=entry,
        )
