"""Model evaluation get command."""

from pydantic import BaseModel, Field

from automl_video_explorer.models import ModelEvaluation
from automl_video_explorer.services import ModelManagementService


class GetModelEvaluationRequest(BaseModel):
    """Request model for fetching one model evaluation."""

    model_id: str = Field(description="Bare id of the model")
    evaluation_id: str = Field(description="Bare id of the evaluation")

    model_config = {"protected_namespaces": ()}


class GetModelEvaluationResponse(BaseModel):
    """Response model for get-model-evaluation command."""

    evaluation: ModelEvaluation = Field(description="The requested evaluation")


class GetModelEvaluationCommand:
    """Command to fetch a model evaluation by id."""

    def __init__(self, service: ModelManagementService) -> None:
        """Initialize the command."""
        self.service = service

    def execute(
        self, request: GetModelEvaluationRequest
    ) -> GetModelEvaluationResponse:
        """Execute the get-model-evaluation command."""
        evaluation = self.service.get_model_evaluation(
            request.model_id, request.evaluation_id
        )
        return GetModelEvaluationResponse(evaluation=evaluation)
