"""Service tying request building to the AutoML client."""

from loguru import logger

from automl_video_explorer.core.errors import InvalidArgumentError, NotFoundError
from automl_video_explorer.core.settings import ExplorerSettings
from automl_video_explorer.models import (
    Model,
    ModelEvaluation,
    OperationStatus,
)
from automl_video_explorer.services.automl_client import AutoMLClient
from automl_video_explorer.services.pagination import LazyRecordSequence
from automl_video_explorer.services.request_builder import RequestBuilder


class ModelManagementService:
    """Runs AutoML model, evaluation and operation calls for one location.

    Every identifier is turned into a typed resource path by the request
    builder before the client is called, so malformed ids never reach the
    remote service.
    """

    def __init__(self, settings: ExplorerSettings, client: AutoMLClient) -> None:
        """Initialize the service.

        Args:
            settings: Validated project and region configuration.
            client: Facade over the remote AutoML service.
        """
        self.settings = settings
        self.client = client
        self.requests = RequestBuilder(settings.project_id, settings.region_name)

    def create_model(self, dataset_id: str, display_name: str) -> OperationStatus:
        """Start training a video classification model on a dataset."""
        location = self.requests.location()
        descriptor = self.requests.model_descriptor(dataset_id, display_name)
        logger.debug(
            f"Creating model '{display_name}' from dataset '{dataset_id}' in {location}"
        )
        operation = self.client.create_model(location, descriptor)
        logger.info(f"Training operation started: {operation.name}")
        return operation

    def list_models(self, filter_expression: str) -> LazyRecordSequence[Model]:
        """List models of the configured location matching a filter."""
        location = self.requests.location()
        logger.debug(f"Listing models in {location} with filter '{filter_expression}'")
        return self.client.list_models(location, filter_expression)

    def get_model(self, model_id: str) -> Model:
        """Fetch a model by its bare id."""
        path = self.requests.model_path(model_id)
        logger.debug(f"Getting model {path}")
        return self.client.get_model(path)

    def delete_model(self, model_id: str) -> OperationStatus:
        """Delete a model by its bare id, waiting for the deletion to finish."""
        path = self.requests.model_path(model_id)
        logger.debug(f"Deleting model {path}")
        return self.client.delete_model(path)

    def list_model_evaluations(
        self, model_id: str, filter_expression: str
    ) -> LazyRecordSequence[ModelEvaluation]:
        """List evaluations of a model matching a filter."""
        path = self.requests.model_path(model_id)
        logger.debug(
            f"Listing evaluations of {path} with filter '{filter_expression}'"
        )
        return self.client.list_model_evaluations(path, filter_expression)

    def get_model_evaluation(self, model_id: str, evaluation_id: str) -> ModelEvaluation:
        """Fetch one evaluation of a model."""
        path = self.requests.model_evaluation_path(model_id, evaluation_id)
        logger.debug(f"Getting model evaluation {path}")
        return self.client.get_model_evaluation(path)

    def find_aggregate_evaluation(
        self, model_id: str, filter_expression: str = ""
    ) -> ModelEvaluation:
        """Find the evaluation of the model as a whole.

        A model has one evaluation per annotation spec plus one overall
        evaluation whose annotation spec id is empty. The whole listing is
        read and the last overall evaluation listed is kept.

        Args:
            model_id: Bare id of the model.
            filter_expression: Filter applied to the evaluation listing.

        Returns:
            The overall evaluation, as listed.

        Raises:
            NotFoundError: If no listed evaluation is an overall evaluation.
        """
        evaluations = self.list_model_evaluations(model_id, filter_expression)
        aggregate = evaluations.last(lambda evaluation: evaluation.is_aggregate)
        if aggregate is None:
            raise NotFoundError(
                f"Model '{model_id}' has no overall evaluation"
                + (f" matching filter '{filter_expression}'" if filter_expression else "")
            )
        logger.debug(f"Overall evaluation of model '{model_id}': {aggregate.name}")
        return aggregate

    def get_operation(self, operation_name: str) -> OperationStatus:
        """Fetch a long-running operation by its full name."""
        if not operation_name.strip():
            raise InvalidArgumentError("operation name must not be empty")
        logger.debug(f"Getting operation {operation_name}")
        return self.client.get_operation(operation_name)

    def list_operations(
        self, filter_expression: str
    ) -> LazyRecordSequence[OperationStatus]:
        """List long-running operations of the configured location."""
        location = self.requests.location()
        logger.debug(
            f"Listing operations in {location} with filter '{filter_expression}'"
        )
        return self.client.list_operations(location, filter_expression)
