"""Model evaluation list command."""

from pydantic import BaseModel, Field

from automl_video_explorer.services import LazyRecordSequence, ModelManagementService


class ListModelEvaluationsRequest(BaseModel):
    """Request model for listing the evaluations of a model."""

    model_id: str = Field(description="Bare id of the model")
    filter_expression: str = Field(
        default="",
        description="Filter expression passed to the service unchanged",
    )

    model_config = {"protected_namespaces": ()}


class ListModelEvaluationsResponse(BaseModel):
    """Response model for list-model-evaluations command."""

    evaluations: LazyRecordSequence = Field(
        description="Lazily fetched sequence of ModelEvaluation records",
    )

    model_config = {"arbitrary_types_allowed": True}


class ListModelEvaluationsCommand:
    """Command to list the evaluations of a model."""

    def __init__(self, service: ModelManagementService) -> None:
        """Initialize the command."""
        self.service = service

    def execute(
        self, request: ListModelEvaluationsRequest
    ) -> ListModelEvaluationsResponse:
        """Execute the list-model-evaluations command."""
        evaluations = self.service.list_model_evaluations(
            request.model_id, request.filter_expression
        )
        return ListModelEvaluationsResponse(evaluations=evaluations)
