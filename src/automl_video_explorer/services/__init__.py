"""Services for talking to the AutoML service."""

from automl_video_explorer.services.automl_client import AutoMLClient
from automl_video_explorer.services.model_management import ModelManagementService
from automl_video_explorer.services.pagination import LazyRecordSequence
from automl_video_explorer.services.request_builder import RequestBuilder

__all__ = [
    "AutoMLClient",
    "LazyRecordSequence",
    "ModelManagementService",
    "RequestBuilder",
]
