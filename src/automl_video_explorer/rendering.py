"""Text rendering of AutoML records.

Every renderer returns the lines to print, in order, so the CLI stays a thin
printing loop and the output format can be tested without a terminal.
Listing renderers are generators: records are rendered as their pages arrive.
"""

from datetime import datetime, timezone
from typing import Iterable, Iterator

from automl_video_explorer.models import (
    ConfidenceMetricsEntry,
    Model,
    ModelEvaluation,
    OperationStatus,
)

INDENT = "  "


def format_timestamp(value: datetime | int | float | None) -> str:
    """Format a timestamp as ISO-8601 with milliseconds and a numeric offset.

    Epoch seconds and naive datetimes are taken to be UTC.

    Args:
        value: Datetime, epoch seconds, or None.

    Returns:
        Text such as ``2021-01-01T00:00:00.000+0000``, or ``-`` when unset.
    """
    if value is None:
        return "-"
    if isinstance(value, datetime):
        moment = value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    else:
        moment = datetime.fromtimestamp(value, tz=timezone.utc)
    return (
        moment.strftime("%Y-%m-%dT%H:%M:%S")
        + f".{moment.microsecond // 1000:03d}"
        + moment.strftime("%z")
    )


def format_percentage(ratio: float) -> str:
    """Format a ratio in [0, 1] as a percentage with two decimals."""
    return f"{ratio * 100:.2f}%"


def format_payload_value(value: bytes) -> str:
    """Decode a packed payload for display, dropping newline characters."""
    return value.decode("utf-8", errors="replace").replace("\n", "")


def render_model(model: Model) -> list[str]:
    """Render the fields of a model."""
    metadata_kind = model.metadata_kind or "model_metadata"
    return [
        f"Model name: {model.name}",
        f"Model id: {model.resource_id}",
        f"Model display name: {model.display_name}",
        f"Dataset id: {model.dataset_id}",
        f"{metadata_kind}: {model.metadata}",
        f"Model create time: {format_timestamp(model.create_time)}",
        f"Model update time: {format_timestamp(model.update_time)}",
        f"Model deployment state: {model.deployment_state.value}",
    ]


def render_model_list(models: Iterable[Model]) -> Iterator[str]:
    """Render a listing of models, one block per model."""
    yield "List of models:"
    for model in models:
        yield ""
        yield from render_model(model)


def render_confidence_metrics_entry(
    entry: ConfidenceMetricsEntry, threshold_digits: int = 6
) -> list[str]:
    """Render the metrics at one confidence threshold."""
    return [
        "Model confidence threshold: "
        f"{entry.confidence_threshold:.{threshold_digits}f}",
        f"Model precision: {format_percentage(entry.precision)}",
        f"Model recall: {format_percentage(entry.recall)}",
        f"Model f1 score: {format_percentage(entry.f1_score)}",
        f"Model precision@1: {format_percentage(entry.precision_at1)}",
        f"Model recall@1: {format_percentage(entry.recall_at1)}",
        f"Model f1 score@1: {format_percentage(entry.f1_score_at1)}",
    ]


def render_model_evaluation(
    evaluation: ModelEvaluation, threshold_digits: int = 6
) -> list[str]:
    """Render an evaluation, followed by its confidence metrics entries.

    Args:
        evaluation: Evaluation to render.
        threshold_digits: Decimals shown for each confidence threshold.
    """
    metrics = evaluation.classification_evaluation_metrics
    lines = [
        f"Model evaluation name: {evaluation.name}",
        f"Model evaluation id: {evaluation.resource_id}",
        f"Model evaluation annotation spec id: {evaluation.annotation_spec_id}",
        f"Model evaluation example count: {evaluation.evaluated_example_count}",
        f"Model evaluation display name: {evaluation.display_name}",
        f"Model evaluation create time: {format_timestamp(evaluation.create_time)}",
        "Video classification evaluation metrics:",
        f"{INDENT}Model au_prc: {metrics.au_prc:f}",
        f"{INDENT}Model au_roc: {metrics.au_roc:f}",
        f"{INDENT}Model log_loss: {metrics.log_loss:f}",
        f"{INDENT}Confidence metrics entries:",
    ]
    for entry in metrics.confidence_metrics_entries:
        entry_lines = render_confidence_metrics_entry(entry, threshold_digits)
        lines.extend(f"{INDENT * 2}{line}" for line in entry_lines)
        lines.append("")
    return lines


def render_model_evaluation_list(
    evaluations: Iterable[ModelEvaluation],
) -> Iterator[str]:
    """Render a listing of evaluations, with thresholds to two decimals."""
    for evaluation in evaluations:
        yield from render_model_evaluation(evaluation, threshold_digits=2)


def render_evaluation_summary(
    evaluation_id: str, threshold: float, entry: ConfidenceMetricsEntry
) -> list[str]:
    """Render the headline metrics of an overall evaluation."""
    return [
        f"Model evaluation id: {evaluation_id}",
        f"Precision and recall are based on a score threshold of {threshold:g}",
        f"Model precision: {format_percentage(entry.precision)}",
        f"Model recall: {format_percentage(entry.recall)}",
        f"Model f1 score: {format_percentage(entry.f1_score)}",
        f"Model precision@1: {format_percentage(entry.precision_at1)}",
        f"Model recall@1: {format_percentage(entry.recall_at1)}",
        f"Model f1 score@1: {format_percentage(entry.f1_score_at1)}",
    ]


def render_operation(operation: OperationStatus) -> list[str]:
    """Render the state of a long-running operation."""
    lines = [
        "Operation details:",
        f"{INDENT}Name: {operation.name}",
        f"{INDENT}Metadata:",
        f"{INDENT * 2}Type url: {operation.metadata.type_url}",
        f"{INDENT * 2}Value: {format_payload_value(operation.metadata.value)}",
        f"{INDENT}Done: {str(operation.done).lower()}",
    ]
    if operation.response is not None:
        lines.extend(
            [
                f"{INDENT}Response:",
                f"{INDENT * 2}Type url: {operation.response.type_url}",
                f"{INDENT * 2}Value: {format_payload_value(operation.response.value)}",
            ]
        )
    if operation.error is not None:
        lines.extend(
            [
                f"{INDENT}Error:",
                f"{INDENT * 2}Error code: {operation.error.code}",
                f"{INDENT * 2}Error message: {operation.error.message}",
            ]
        )
    return lines


def render_operation_list(operations: Iterable[OperationStatus]) -> Iterator[str]:
    """Render a listing of long-running operations."""
    for operation in operations:
        yield from render_operation(operation)


def render_created_model(operation: OperationStatus) -> list[str]:
    """Render the outcome of starting a training operation."""
    return [
        f"Training operation name: {operation.name}",
        "Training started...",
    ]


def render_deleted_model(model_id: str, operation: OperationStatus) -> list[str]:
    """Render the outcome of a finished model deletion."""
    return [
        f"Deletion operation name: {operation.name}",
        f"Model {model_id} deleted.",
    ]
