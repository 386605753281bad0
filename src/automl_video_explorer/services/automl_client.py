"""Abstract interface of the remote AutoML service."""

from abc import ABC, abstractmethod

from automl_video_explorer.models import (
    LocationPath,
    Model,
    ModelDescriptor,
    ModelEvaluation,
    ModelEvaluationPath,
    ModelPath,
    OperationStatus,
)
from automl_video_explorer.services.pagination import LazyRecordSequence


class AutoMLClient(ABC):
    """Narrow facade over the AutoML model-management service.

    Implementations translate between local records and the wire format and
    raise ``RemoteCallError`` for any failure reported by the service.
    Filters are passed through untouched.
    """

    @abstractmethod
    def create_model(
        self, location: LocationPath, descriptor: ModelDescriptor
    ) -> OperationStatus:
        """Start training a model.

        Returns:
            The initial state of the training operation.
        """
        pass

    @abstractmethod
    def delete_model(self, model_path: ModelPath) -> OperationStatus:
        """Delete a model and block until the deletion has finished.

        Returns:
            The final state of the deletion operation.
        """
        pass

    @abstractmethod
    def get_model(self, model_path: ModelPath) -> Model:
        """Fetch one model."""
        pass

    @abstractmethod
    def list_models(
        self, location: LocationPath, filter_expression: str
    ) -> LazyRecordSequence[Model]:
        """List the models of a location."""
        pass

    @abstractmethod
    def get_model_evaluation(
        self, evaluation_path: ModelEvaluationPath
    ) -> ModelEvaluation:
        """Fetch one model evaluation."""
        pass

    @abstractmethod
    def list_model_evaluations(
        self, model_path: ModelPath, filter_expression: str
    ) -> LazyRecordSequence[ModelEvaluation]:
        """List the evaluations of a model."""
        pass

    @abstractmethod
    def get_operation(self, operation_name: str) -> OperationStatus:
        """Fetch the latest state of a long-running operation."""
        pass

    @abstractmethod
    def list_operations(
        self, location: LocationPath, filter_expression: str
    ) -> LazyRecordSequence[OperationStatus]:
        """List the long-running operations of a location."""
        pass
