"""Builds typed request values from configuration and CLI input."""

from pydantic import ValidationError

from automl_video_explorer.core.errors import InvalidArgumentError
from automl_video_explorer.models import (
    LocationPath,
    ModelDescriptor,
    ModelEvaluationPath,
    ModelPath,
    VideoClassificationModelMetadata,
)


class RequestBuilder:
    """Builds resource paths and model descriptors for one project and region.

    Invalid identifiers (empty, or containing ``/``) are rejected with
    ``InvalidArgumentError`` before any remote call is made.
    """

    def __init__(self, project_id: str, region: str) -> None:
        self.project_id = project_id
        self.region = region

    def location(self) -> LocationPath:
        """Path of the configured project and region."""
        return self._build(LocationPath)

    def model_path(self, model_id: str) -> ModelPath:
        """Path of a model in the configured location."""
        return self._build(ModelPath, model_id=model_id)

    def model_evaluation_path(
        self, model_id: str, evaluation_id: str
    ) -> ModelEvaluationPath:
        """Path of one evaluation of a model in the configured location."""
        return self._build(
            ModelEvaluationPath, model_id=model_id, evaluation_id=evaluation_id
        )

    def model_descriptor(self, dataset_id: str, display_name: str) -> ModelDescriptor:
        """Descriptor of a video classification model to train."""
        try:
            return ModelDescriptor(
                display_name=display_name,
                dataset_id=dataset_id,
                video_classification_model_metadata=VideoClassificationModelMetadata(),
            )
        except ValidationError as e:
            raise InvalidArgumentError(_describe(e)) from e

    def _build(self, path_type, **ids):
        try:
            return path_type(project_id=self.project_id, region=self.region, **ids)
        except ValidationError as e:
            raise InvalidArgumentError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )
