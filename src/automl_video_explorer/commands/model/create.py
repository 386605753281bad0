"""Model create command."""

from pydantic import BaseModel, Field

from automl_video_explorer.models import OperationStatus
from automl_video_explorer.services import ModelManagementService


class CreateModelRequest(BaseModel):
    """Request model for training a new video classification model."""

    dataset_id: str = Field(
        description="Id of the dataset to train the model on",
    )
    model_name: str = Field(
        description="Display name of the new model",
    )

    model_config = {"protected_namespaces": ()}


class CreateModelResponse(BaseModel):
    """Response model for create-model command."""

    operation: OperationStatus = Field(
        description="Initial state of the training operation",
    )


class CreateModelCommand:
    """Command to start training a model."""

    def __init__(self, service: ModelManagementService) -> None:
        """Initialize the command."""
        self.service = service

    def execute(self, request: CreateModelRequest) -> CreateModelResponse:
        """Execute the create-model command.

        Args:
            request: Dataset id and display name of the model.

        Returns:
            Response carrying the training operation.

        Raises:
            InvalidArgumentError: If the dataset id or name is empty.
            RemoteCallError: If the service rejects the request.
        """
        operation = self.service.create_model(
            dataset_id=request.dataset_id,
            display_name=request.model_name,
        )
        return CreateModelResponse(operation=operation)
