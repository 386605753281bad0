"""Operation status get command."""

from pydantic import BaseModel, Field

from automl_video_explorer.models import OperationStatus
from automl_video_explorer.services import ModelManagementService


class GetOperationStatusRequest(BaseModel):
    """Request model for fetching a long-running operation."""

    operation_name: str = Field(
        description="Full operation name, e.g. projects/P/locations/R/operations/O",
    )


class GetOperationStatusResponse(BaseModel):
    """Response model for get-operation-status command."""

    operation: OperationStatus = Field(description="Latest operation state")


class GetOperationStatusCommand:
    """Command to poll a long-running operation."""

    def __init__(self, service: ModelManagementService) -> None:
        """Initialize the command."""
        self.service = service

    def execute(self, request: GetOperationStatusRequest) -> GetOperationStatusResponse:
        """Execute the get-operation-status command."""
        operation = self.service.get_operation(request.operation_name)
        return GetOperationStatusResponse(operation=operation)
