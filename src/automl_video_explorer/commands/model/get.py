"""Model get command."""

from pydantic import BaseModel, Field

from automl_video_explorer.models import Model
from automl_video_explorer.services import ModelManagementService


class GetModelRequest(BaseModel):
    """Request model for fetching one model."""

    model_id: str = Field(description="Bare id of the model")

    model_config = {"protected_namespaces": ()}


class GetModelResponse(BaseModel):
    """Response model for get-model command."""

    model: Model = Field(description="The requested model")


class GetModelCommand:
    """Command to fetch a model by id."""

    def __init__(self, service: ModelManagementService) -> None:
        """Initialize the command."""
        self.service = service

    def execute(self, request: GetModelRequest) -> GetModelResponse:
        """Execute the get-model command."""
        return GetModelResponse(model=self.service.get_model(request.model_id))
