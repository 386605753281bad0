"""Operation status list command."""

from pydantic import BaseModel, Field

from automl_video_explorer.services import LazyRecordSequence, ModelManagementService


class ListOperationsStatusRequest(BaseModel):
    """Request model for listing long-running operations."""

    filter_expression: str = Field(
        default="",
        description="Filter expression passed to the service unchanged",
    )


class ListOperationsStatusResponse(BaseModel):
    """Response model for list-operations-status command."""

    operations: LazyRecordSequence = Field(
        description="Lazily fetched sequence of OperationStatus records",
    )

    model_config = {"arbitrary_types_allowed": True}


class ListOperationsStatusCommand:
    """Command to list the long-running operations of the configured location."""

    def __init__(self, service: ModelManagementService) -> None:
        """Initialize the command."""
        self.service = service

    def execute(
        self, request: ListOperationsStatusRequest
    ) -> ListOperationsStatusResponse:
        """Execute the list-operations-status command."""
        operations = self.service.list_operations(request.filter_expression)
        return ListOperationsStatusResponse(operations=operations)
