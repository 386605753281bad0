"""Model delete command."""

from pydantic import BaseModel, Field

from automl_video_explorer.models import OperationStatus
from automl_video_explorer.services import ModelManagementService


class DeleteModelRequest(BaseModel):
    """Request model for deleting a model."""

    model_id: str = Field(description="Bare id of the model to delete")

    model_config = {"protected_namespaces": ()}


class DeleteModelResponse(BaseModel):
    """Response model for delete-model command."""

    model_id: str = Field(description="Bare id of the deleted model")
    operation: OperationStatus = Field(
        description="Final state of the deletion operation",
    )

    model_config = {"protected_namespaces": ()}


class DeleteModelCommand:
    """Command to delete a model and wait for the deletion to finish."""

    def __init__(self, service: ModelManagementService) -> None:
        """Initialize the command."""
        self.service = service

    def execute(self, request: DeleteModelRequest) -> DeleteModelResponse:
        """Execute the delete-model command.

        Raises:
            RemoteCallError: If the deletion is rejected or fails.
        """
        operation = self.service.delete_model(request.model_id)
        return DeleteModelResponse(model_id=request.model_id, operation=operation)
