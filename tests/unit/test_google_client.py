"""Unit tests for the google-cloud-automl backed client."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import automl_v1beta1 as automl
from google.longrunning import operations_pb2
from google.protobuf import any_pb2, timestamp_pb2
from google.rpc import status_pb2

from automl_video_explorer.core import RemoteCallError
from automl_video_explorer.models import (
    DeploymentState,
    ModelDescriptor,
    OperationOutcome,
)
from automl_video_explorer.services import RequestBuilder
from automl_video_explorer.services import google_client
from automl_video_explorer.services.google_client import (
    GoogleAutoMLClient,
    to_model,
    to_model_evaluation,
    to_operation_status,
)

MODEL_NAME = "projects/p/locations/us-central1/models/VCN1"
OPERATION_NAME = "projects/p/locations/us-central1/operations/VCN-op-1"
METADATA_TYPE = "type.googleapis.com/google.cloud.automl.v1beta1.OperationMetadata"


def model_message(**overrides) -> automl.Model:
    """Build a video classification model message."""
    fields = dict(
        name=MODEL_NAME,
        display_name="my_model",
        dataset_id="VCN123",
        video_classification_model_metadata=automl.VideoClassificationModelMetadata(),
        create_time=timestamp_pb2.Timestamp(seconds=1609459200),
        update_time=timestamp_pb2.Timestamp(seconds=1609462800, nanos=250_000_000),
        deployment_state=automl.Model.DeploymentState.DEPLOYED,
    )
    fields.update(overrides)
    return automl.Model(**fields)


def evaluation_message(evaluation_id: str, annotation_spec_id: str = ""):
    """Build a model evaluation message with two metrics entries."""
    entry = automl.ClassificationEvaluationMetrics.ConfidenceMetricsEntry
    return automl.ModelEvaluation(
        name=f"{MODEL_NAME}/modelEvaluations/{evaluation_id}",
        annotation_spec_id=annotation_spec_id,
        display_name="",
        evaluated_example_count=40,
        classification_evaluation_metrics=automl.ClassificationEvaluationMetrics(
            au_prc=0.75,
            au_roc=0.875,
            log_loss=0.25,
            confidence_metrics_entry=[
                entry(confidence_threshold=0.25, precision=0.5, recall=1.0),
                entry(
                    confidence_threshold=0.5,
                    precision=0.75,
                    recall=0.5,
                    f1_score=0.625,
                    precision_at1=0.5,
                    recall_at1=0.25,
                    f1_score_at1=0.375,
                ),
            ],
        ),
    )


def operation_message(**fields) -> operations_pb2.Operation:
    """Build a long-running operation message."""
    return operations_pb2.Operation(
        name=OPERATION_NAME,
        metadata=any_pb2.Any(type_url=METADATA_TYPE, value=b"\x0a\x02\x08\x01"),
        **fields,
    )


@pytest.fixture
def library_client():
    """Mocked automl_v1beta1.AutoMlClient."""
    return MagicMock(
        spec_set=[
            "create_model",
            "delete_model",
            "get_model",
            "list_models",
            "get_model_evaluation",
            "list_model_evaluations",
            "transport",
        ]
    )


@pytest.fixture
def client(library_client):
    """GoogleAutoMLClient wrapping the mocked library client."""
    return GoogleAutoMLClient(client=library_client)


@pytest.fixture
def builder():
    """Request builder for the test project."""
    return RequestBuilder("p", "us-central1")


class TestConversions:
    """Tests for message to record conversion."""

    def test_to_model(self):
        """Test that every model field is carried over."""
        model = to_model(model_message())

        assert model.name == MODEL_NAME
        assert model.resource_id == "VCN1"
        assert model.display_name == "my_model"
        assert model.dataset_id == "VCN123"
        assert model.metadata_kind == "video_classification_model_metadata"
        assert model.metadata == {}
        assert model.create_time == datetime(2021, 1, 1, tzinfo=timezone.utc)
        assert model.update_time.microsecond == 250_000
        assert model.deployment_state == DeploymentState.DEPLOYED

    def test_to_model_without_optional_fields(self):
        """Test a model message with unset metadata, times and state."""
        model = to_model(automl.Model(name=MODEL_NAME))

        assert model.metadata_kind is None
        assert model.create_time is None
        assert model.deployment_state == DeploymentState.DEPLOYMENT_STATE_UNSPECIFIED

    def test_to_model_evaluation(self):
        """Test that metrics and every entry are carried over."""
        evaluation = to_model_evaluation(evaluation_message("42", "cat1"))

        assert evaluation.resource_id == "42"
        assert evaluation.annotation_spec_id == "cat1"
        assert not evaluation.is_aggregate
        assert evaluation.evaluated_example_count == 40
        metrics = evaluation.classification_evaluation_metrics
        assert (metrics.au_prc, metrics.au_roc, metrics.log_loss) == (
            0.75,
            0.875,
            0.25,
        )
        assert len(metrics.confidence_metrics_entries) == 2
        entry = metrics.entry_at(0.5)
        assert entry.precision == 0.75
        assert entry.f1_score_at1 == 0.375

    def test_to_operation_status_pending(self):
        """Test a running operation."""
        operation = to_operation_status(operation_message())

        assert operation.outcome == OperationOutcome.PENDING
        assert operation.metadata.type_url == METADATA_TYPE
        assert operation.metadata.value == b"\x0a\x02\x08\x01"

    def test_to_operation_status_failed(self):
        """Test a finished operation with an error status."""
        operation = to_operation_status(
            operation_message(
                done=True, error=status_pb2.Status(code=3, message="bad dataset")
            )
        )

        assert operation.outcome == OperationOutcome.FAILED
        assert (operation.error.code, operation.error.message) == (3, "bad dataset")

    def test_to_operation_status_succeeded_without_response(self):
        """Test that no response is invented for a finished empty operation."""
        operation = to_operation_status(operation_message(done=True))

        assert operation.outcome == OperationOutcome.SUCCEEDED
        assert operation.response is None
        assert operation.error is None

    def test_to_operation_status_keeps_response(self):
        """Test that a response sent by the service is carried over."""
        operation = to_operation_status(
            operation_message(
                done=True,
                response=any_pb2.Any(
                    type_url="type.googleapis.com/google.protobuf.Empty"
                ),
            )
        )

        assert operation.response.type_url == (
            "type.googleapis.com/google.protobuf.Empty"
        )


class TestGoogleAutoMLClient:
    """Tests for the calls made on the library client."""

    def test_create_model(self, client, library_client, builder):
        """Test that one CreateModel call is sent with the video marker."""
        library_client.create_model.return_value = MagicMock(
            operation=operation_message()
        )
        descriptor = ModelDescriptor(display_name="my_model", dataset_id="VCN123")

        operation = client.create_model(builder.location(), descriptor)

        library_client.create_model.assert_called_once()
        kwargs = library_client.create_model.call_args.kwargs
        assert kwargs["parent"] == "projects/p/locations/us-central1"
        assert kwargs["model"].display_name == "my_model"
        assert kwargs["model"].dataset_id == "VCN123"
        assert "video_classification_model_metadata" in kwargs["model"]
        assert operation.name == OPERATION_NAME

    def test_delete_model_waits_for_result(self, client, library_client, builder):
        """Test that the deletion future is waited on."""
        future = MagicMock(operation=operation_message(done=True))
        library_client.delete_model.return_value = future

        operation = client.delete_model(builder.model_path("VCN1"))

        library_client.delete_model.assert_called_once_with(name=MODEL_NAME)
        future.result.assert_called_once_with()
        assert operation.done

    def test_get_model(self, client, library_client, builder):
        """Test fetching a model by path."""
        library_client.get_model.return_value = model_message()

        model = client.get_model(builder.model_path("VCN1"))

        library_client.get_model.assert_called_once_with(name=MODEL_NAME)
        assert model.display_name == "my_model"

    def test_list_models_is_lazy_and_restartable(
        self, client, library_client, builder
    ):
        """Test that each iteration issues a fresh list call."""
        library_client.list_models.side_effect = lambda **_: iter(
            [model_message(), model_message(display_name="other")]
        )

        models = client.list_models(builder.location(), "display_name=x")

        library_client.list_models.assert_not_called()
        assert [m.display_name for m in models] == ["my_model", "other"]
        assert [m.display_name for m in models] == ["my_model", "other"]
        assert library_client.list_models.call_count == 2
        request = library_client.list_models.call_args.kwargs["request"]
        assert request.parent == "projects/p/locations/us-central1"
        assert request.filter == "display_name=x"

    def test_list_model_evaluations(self, client, library_client, builder):
        """Test listing evaluations under the model path."""
        library_client.list_model_evaluations.side_effect = lambda **_: [
            evaluation_message("1", "cat1"),
            evaluation_message("2"),
        ]

        evaluations = client.list_model_evaluations(builder.model_path("VCN1"), "")

        aggregate = evaluations.last(lambda e: e.is_aggregate)
        assert aggregate.resource_id == "2"
        request = library_client.list_model_evaluations.call_args.kwargs["request"]
        assert request.parent == MODEL_NAME

    def test_get_model_evaluation(self, client, library_client, builder):
        """Test fetching one evaluation by path."""
        library_client.get_model_evaluation.return_value = evaluation_message("7")

        evaluation = client.get_model_evaluation(
            builder.model_evaluation_path("VCN1", "7")
        )

        library_client.get_model_evaluation.assert_called_once_with(
            name=f"{MODEL_NAME}/modelEvaluations/7"
        )
        assert evaluation.is_aggregate

    def test_operations_use_transport_operations_client(
        self, client, library_client, builder
    ):
        """Test that operation calls go through the operations client."""
        operations_client = library_client.transport.operations_client
        operations_client.get_operation.return_value = operation_message()
        operations_client.list_operations.side_effect = lambda *_: [
            operation_message(),
            operation_message(done=True),
        ]

        operation = client.get_operation(OPERATION_NAME)
        listed = list(client.list_operations(builder.location(), "done=true"))

        operations_client.get_operation.assert_called_once_with(OPERATION_NAME)
        operations_client.list_operations.assert_called_once_with(
            "projects/p/locations/us-central1", "done=true"
        )
        assert operation.name == OPERATION_NAME
        assert [o.outcome for o in listed] == [
            OperationOutcome.PENDING,
            OperationOutcome.SUCCEEDED,
        ]


class TestErrorTranslation:
    """Tests for translation of library errors."""

    def test_api_error_keeps_status_code(self, client, library_client, builder):
        """Test that a NotFound becomes a RemoteCallError with code 404."""
        library_client.get_model.side_effect = google_exceptions.NotFound("gone")

        with pytest.raises(RemoteCallError) as exc_info:
            client.get_model(builder.model_path("VCN1"))

        assert exc_info.value.code == 404
        assert "GetModel failed" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, google_exceptions.NotFound)

    def test_error_on_first_page_is_raised_on_iteration(
        self, client, library_client, builder
    ):
        """Test that listing errors surface when the sequence is consumed."""
        library_client.list_models.side_effect = google_exceptions.PermissionDenied(
            "denied"
        )

        models = client.list_models(builder.location(), "")

        with pytest.raises(RemoteCallError) as exc_info:
            list(models)
        assert exc_info.value.code == 403

    def test_error_on_later_page_is_translated(self, client, library_client, builder):
        """Test that a failure while paging is translated too."""

        def pages(**_):
            yield model_message()
            raise google_exceptions.ServiceUnavailable("try later")

        library_client.list_models.side_effect = pages
        models = iter(client.list_models(builder.location(), ""))

        assert next(models).display_name == "my_model"
        with pytest.raises(RemoteCallError, match="ListModels failed"):
            next(models)

    def test_failed_deletion_is_translated(self, client, library_client, builder):
        """Test that a deletion finishing with an error fails the call."""
        future = MagicMock()
        future.result.side_effect = google_exceptions.FailedPrecondition(
            "model is deployed"
        )
        library_client.delete_model.return_value = future

        with pytest.raises(RemoteCallError, match="DeleteModel failed"):
            client.delete_model(builder.model_path("VCN1"))

    def test_unexpected_model_name(self):
        """Test that a model name of another shape is a remote error."""
        with pytest.raises(RemoteCallError, match="Unexpected resource name"):
            to_model(model_message(name="projects/p/models/VCN1"))

    def test_unexpected_evaluation_name_while_listing(
        self, client, library_client, builder
    ):
        """Test that a malformed listed evaluation fails during iteration."""
        bad = evaluation_message("1")
        bad.name = MODEL_NAME
        library_client.list_model_evaluations.side_effect = lambda **_: [bad]

        evaluations = client.list_model_evaluations(builder.model_path("VCN1"), "")

        with pytest.raises(RemoteCallError):
            list(evaluations)

    def test_missing_credentials(self, monkeypatch, builder):
        """Test that credential errors while creating the client are translated."""

        def no_credentials(*args, **kwargs):
            raise auth_exceptions.DefaultCredentialsError("no credentials")

        monkeypatch.setattr(google_client.automl, "AutoMlClient", no_credentials)

        with pytest.raises(RemoteCallError) as exc_info:
            GoogleAutoMLClient().get_model(builder.model_path("VCN1"))

        assert exc_info.value.code is None
