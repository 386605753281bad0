"""Model list command."""

from pydantic import BaseModel, Field

from automl_video_explorer.services import LazyRecordSequence, ModelManagementService

DEFAULT_MODEL_FILTER = "video_classification_model_metadata:*"


class ListModelsRequest(BaseModel):
    """Request model for listing models."""

    filter_expression: str = Field(
        default=DEFAULT_MODEL_FILTER,
        description="Filter expression passed to the service unchanged",
    )


class ListModelsResponse(BaseModel):
    """Response model for list-models command."""

    models: LazyRecordSequence = Field(
        description="Lazily fetched sequence of Model records",
    )

    model_config = {"arbitrary_types_allowed": True}


class ListModelsCommand:
    """Command to list the models of the configured location."""

    def __init__(self, service: ModelManagementService) -> None:
        """Initialize the command."""
        self.service = service

    def execute(self, request: ListModelsRequest) -> ListModelsResponse:
        """Execute the list-models command.

        No page is fetched until the returned sequence is iterated.
        """
        models = self.service.list_models(request.filter_expression)
        return ListModelsResponse(models=models)
