"""AutoML client backed by the google-cloud-automl library."""

from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator

from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import automl_v1beta1 as automl
from google.longrunning import operations_pb2
from google.protobuf import json_format
from loguru import logger

from automl_video_explorer.core.errors import RemoteCallError
from automl_video_explorer.models import (
    AnyPayload,
    ClassificationEvaluationMetrics,
    ConfidenceMetricsEntry,
    DeploymentState,
    LocationPath,
    Model,
    ModelDescriptor,
    ModelEvaluation,
    ModelEvaluationPath,
    ModelPath,
    OperationError,
    OperationStatus,
)
from automl_video_explorer.services.automl_client import AutoMLClient
from automl_video_explorer.services.pagination import LazyRecordSequence


@contextmanager
def _remote_call(action: str) -> Iterator[None]:
    """Translate client library failures into ``RemoteCallError``."""
    try:
        yield
    except google_exceptions.GoogleAPIError as e:
        raise RemoteCallError(f"{action} failed: {e}", code=getattr(e, "code", None)) from e
    except auth_exceptions.GoogleAuthError as e:
        raise RemoteCallError(f"{action} failed: {e}") from e


def _paged(action: str, call: Callable[[], Iterable[Any]]) -> Callable[[], Iterator[Any]]:
    """Wrap a paged list call so page fetches also translate errors."""

    def fetch() -> Iterator[Any]:
        with _remote_call(action):
            yield from call()

    return fetch


def _resource_name(path_type, name: str) -> str:
    """Return ``name`` if it follows the template of ``path_type``.

    Raises:
        RemoteCallError: If the service sent a name of another shape.
    """
    try:
        path_type.parse(name)
    except ValueError as e:
        raise RemoteCallError(f"Unexpected resource name from the service: {e}") from e
    return name


def to_model(message: automl.Model) -> Model:
    """Convert an AutoML model message into a ``Model`` record."""
    metadata_kind = None
    metadata: dict[str, Any] = {}
    for field, value in automl.Model.pb(message).ListFields():
        if field.name.endswith("_model_metadata"):
            metadata_kind = field.name
            metadata = json_format.MessageToDict(
                value, preserving_proto_field_name=True
            )
            break

    state = DeploymentState.__members__.get(
        message.deployment_state.name,
        DeploymentState.DEPLOYMENT_STATE_UNSPECIFIED,
    )

    return Model(
        name=_resource_name(ModelPath, message.name),
        display_name=message.display_name,
        dataset_id=message.dataset_id,
        metadata_kind=metadata_kind,
        metadata=metadata,
        create_time=message.create_time,
        update_time=message.update_time,
        deployment_state=state,
    )


def to_model_evaluation(message: automl.ModelEvaluation) -> ModelEvaluation:
    """Convert an AutoML model evaluation message into a record."""
    metrics = message.classification_evaluation_metrics
    entries = [
        ConfidenceMetricsEntry(
            confidence_threshold=entry.confidence_threshold,
            precision=entry.precision,
            recall=entry.recall,
            f1_score=entry.f1_score,
            precision_at1=entry.precision_at1,
            recall_at1=entry.recall_at1,
            f1_score_at1=entry.f1_score_at1,
        )
        for entry in metrics.confidence_metrics_entry
    ]

    return ModelEvaluation(
        name=_resource_name(ModelEvaluationPath, message.name),
        annotation_spec_id=message.annotation_spec_id,
        display_name=message.display_name,
        evaluated_example_count=message.evaluated_example_count,
        create_time=message.create_time,
        classification_evaluation_metrics=ClassificationEvaluationMetrics(
            au_prc=metrics.au_prc,
            au_roc=metrics.au_roc,
            log_loss=metrics.log_loss,
            confidence_metrics_entries=entries,
        ),
    )


def to_operation_status(operation: operations_pb2.Operation) -> OperationStatus:
    """Convert a long-running operation message into a record.

    The response is kept only when the service sent one, so a finished
    operation may carry neither a response nor an error.
    """
    response = None
    error = None
    if operation.done:
        if operation.HasField("error"):
            error = OperationError(
                code=operation.error.code, message=operation.error.message
            )
        elif operation.HasField("response"):
            response = AnyPayload(
                type_url=operation.response.type_url,
                value=operation.response.value,
            )

    return OperationStatus(
        name=operation.name,
        metadata=AnyPayload(
            type_url=operation.metadata.type_url,
            value=operation.metadata.value,
        ),
        done=operation.done,
        response=response,
        error=error,
    )


class GoogleAutoMLClient(AutoMLClient):
    """``AutoMLClient`` implementation using the v1beta1 AutoML API.

    The underlying library client is created on first use, so constructing
    this class never touches credentials.

    Args:
        client: Optional pre-built ``automl_v1beta1.AutoMlClient``.
    """

    def __init__(self, client: automl.AutoMlClient | None = None) -> None:
        self._client = client

    @property
    def client(self) -> automl.AutoMlClient:
        """The library client, created on first access."""
        if self._client is None:
            logger.debug("Creating AutoML client")
            with _remote_call("Creating AutoML client"):
                self._client = automl.AutoMlClient()
        return self._client

    @property
    def operations_client(self):
        """Client for the long-running operations of the AutoML service."""
        return self.client.transport.operations_client

    def create_model(
        self, location: LocationPath, descriptor: ModelDescriptor
    ) -> OperationStatus:
        model = automl.Model(
            display_name=descriptor.display_name,
            dataset_id=descriptor.dataset_id,
            video_classification_model_metadata=automl.VideoClassificationModelMetadata(),
        )
        with _remote_call("CreateModel"):
            future = self.client.create_model(parent=str(location), model=model)
        return to_operation_status(future.operation)

    def delete_model(self, model_path: ModelPath) -> OperationStatus:
        with _remote_call("DeleteModel"):
            future = self.client.delete_model(name=str(model_path))
            future.result()
        return to_operation_status(future.operation)

    def get_model(self, model_path: ModelPath) -> Model:
        with _remote_call("GetModel"):
            message = self.client.get_model(name=str(model_path))
        return to_model(message)

    def list_models(
        self, location: LocationPath, filter_expression: str
    ) -> LazyRecordSequence[Model]:
        request = automl.ListModelsRequest(
            parent=str(location), filter=filter_expression
        )
        return LazyRecordSequence(
            _paged("ListModels", lambda: self.client.list_models(request=request)),
            to_model,
        )

    def get_model_evaluation(
        self, evaluation_path: ModelEvaluationPath
    ) -> ModelEvaluation:
        with _remote_call("GetModelEvaluation"):
            message = self.client.get_model_evaluation(name=str(evaluation_path))
        return to_model_evaluation(message)

    def list_model_evaluations(
        self, model_path: ModelPath, filter_expression: str
    ) -> LazyRecordSequence[ModelEvaluation]:
        request = automl.ListModelEvaluationsRequest(
            parent=str(model_path), filter=filter_expression
        )
        return LazyRecordSequence(
            _paged(
                "ListModelEvaluations",
                lambda: self.client.list_model_evaluations(request=request),
            ),
            to_model_evaluation,
        )

    def get_operation(self, operation_name: str) -> OperationStatus:
        with _remote_call("GetOperation"):
            operation = self.operations_client.get_operation(operation_name)
        return to_operation_status(operation)

    def list_operations(
        self, location: LocationPath, filter_expression: str
    ) -> LazyRecordSequence[OperationStatus]:
        return LazyRecordSequence(
            _paged(
                "ListOperations",
                lambda: self.operations_client.list_operations(
                    str(location), filter_expression
                ),
            ),
            to_operation_status,
        )
