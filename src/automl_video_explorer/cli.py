"""Command-line interface for the AutoML Video Explorer."""

from typing import Iterable, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from typing_extensions import Annotated

from automl_video_explorer.commands import (
    DEFAULT_MODEL_FILTER,
    CreateModelCommand,
    CreateModelRequest,
    DeleteModelCommand,
    DeleteModelRequest,
    DisplayEvaluationCommand,
    DisplayEvaluationRequest,
    GetModelCommand,
    GetModelEvaluationCommand,
    GetModelEvaluationRequest,
    GetModelRequest,
    GetOperationStatusCommand,
    GetOperationStatusRequest,
    ListModelEvaluationsCommand,
    ListModelEvaluationsRequest,
    ListModelsCommand,
    ListModelsRequest,
    ListOperationsStatusCommand,
    ListOperationsStatusRequest,
)
from automl_video_explorer.core import (
    ConfigError,
    ExplorerError,
    load_settings,
    setup_logging,
)
from automl_video_explorer.rendering import (
    render_created_model,
    render_deleted_model,
    render_evaluation_summary,
    render_model,
    render_model_evaluation,
    render_model_evaluation_list,
    render_model_list,
    render_operation,
    render_operation_list,
)
from automl_video_explorer.services import AutoMLClient, ModelManagementService
from automl_video_explorer.services.google_client import GoogleAutoMLClient

app = typer.Typer(
    name="automl-video-explorer",
    help="Manage AutoML video classification models, evaluations and operations.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


class CLIState:
    """State shared by the subcommands of one invocation.

    The service is built on first use: settings are read from the
    environment once, logging is configured, and the AutoML client is
    attached. A client supplied up front (as the typer context object)
    replaces the Google client.
    """

    def __init__(self, client: AutoMLClient | None = None, verbose: bool = False) -> None:
        self.client = client
        self.verbose = verbose
        self._service: ModelManagementService | None = None

    def service(self) -> ModelManagementService:
        """Return the model management service, building it if needed.

        Raises:
            ConfigError: If PROJECT_ID or REGION_NAME is missing or invalid.
        """
        if self._service is None:
            settings = load_settings()
            setup_logging("DEBUG" if self.verbose else settings.log_level)
            client = self.client if self.client is not None else GoogleAutoMLClient()
            self._service = ModelManagementService(settings, client)
        return self._service


def _service(ctx: typer.Context) -> ModelManagementService:
    try:
        return ctx.obj.service()
    except ConfigError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)


def _echo(lines: Iterable[str]) -> None:
    for line in lines:
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _fail(action: str, error: ExplorerError) -> NoReturn:
    console.print(f"[red]Error {action}: {escape(str(error))}[/red]", soft_wrap=True)
    raise typer.Exit(1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output to stderr (overrides LOG_LEVEL)",
        ),
    ] = False,
) -> None:
    """Manage AutoML video classification models, evaluations and operations.

    The project and region are read from the PROJECT_ID and REGION_NAME
    environment variables.
    """
    client = ctx.obj if isinstance(ctx.obj, AutoMLClient) else None
    ctx.obj = CLIState(client=client, verbose=verbose)


@app.command("create_model")
def create_model(
    ctx: typer.Context,
    dataset_id: Annotated[
        str,
        typer.Argument(help="Id of the dataset to train the model on"),
    ],
    model_name: Annotated[
        str,
        typer.Argument(help="Display name of the new model"),
    ],
) -> None:
    """Start training a video classification model.

    Examples:
        automl-video-explorer create_model VCN1234567890 my_video_model
    """
    service = _service(ctx)
    try:
        request = CreateModelRequest(dataset_id=dataset_id, model_name=model_name)
        response = CreateModelCommand(service).execute(request)
        _echo(render_created_model(response.operation))
    except ExplorerError as e:
        _fail("creating model", e)


@app.command("list_models")
def list_models(
    ctx: typer.Context,
    filter_expression: Annotated[
        str,
        typer.Argument(
            metavar="[FILTER]",
            help="Filter expression passed to the service",
        ),
    ] = DEFAULT_MODEL_FILTER,
) -> None:
    """List the models of the configured project and region."""
    service = _service(ctx)
    try:
        request = ListModelsRequest(filter_expression=filter_expression)
        response = ListModelsCommand(service).execute(request)
        _echo(render_model_list(response.models))
    except ExplorerError as e:
        _fail("listing models", e)


@app.command("get_model")
def get_model(
    ctx: typer.Context,
    model_id: Annotated[str, typer.Argument(help="Id of the model")],
) -> None:
    """Show the details of a model."""
    service = _service(ctx)
    try:
        request = GetModelRequest(model_id=model_id)
        response = GetModelCommand(service).execute(request)
        _echo(render_model(response.model))
    except ExplorerError as e:
        _fail("getting model", e)


@app.command("list_model_evaluations")
def list_model_evaluations(
    ctx: typer.Context,
    model_id: Annotated[str, typer.Argument(help="Id of the model")],
    filter_expression: Annotated[
        str,
        typer.Argument(
            metavar="[FILTER]",
            help="Filter expression passed to the service",
        ),
    ] = "",
) -> None:
    """List the evaluations of a model."""
    service = _service(ctx)
    try:
        request = ListModelEvaluationsRequest(
            model_id=model_id, filter_expression=filter_expression
        )
        response = ListModelEvaluationsCommand(service).execute(request)
        _echo(render_model_evaluation_list(response.evaluations))
    except ExplorerError as e:
        _fail("listing model evaluations", e)


@app.command("get_model_evaluation")
def get_model_evaluation(
    ctx: typer.Context,
    model_id: Annotated[str, typer.Argument(help="Id of the model")],
    model_evaluation_id: Annotated[
        str, typer.Argument(help="Id of the model evaluation")
    ],
) -> None:
    """Show one evaluation of a model with all confidence metrics entries."""
    service = _service(ctx)
    try:
        request = GetModelEvaluationRequest(
            model_id=model_id, evaluation_id=model_evaluation_id
        )
        response = GetModelEvaluationCommand(service).execute(request)
        _echo(render_model_evaluation(response.evaluation))
    except ExplorerError as e:
        _fail("getting model evaluation", e)


@app.command("display_evaluation")
def display_evaluation(
    ctx: typer.Context,
    model_id: Annotated[str, typer.Argument(help="Id of the model")],
    filter_expression: Annotated[
        str,
        typer.Argument(
            metavar="[FILTER]",
            help="Filter applied when listing the model's evaluations",
        ),
    ] = "",
) -> None:
    """Show the overall precision and recall of a model at threshold 0.5."""
    service = _service(ctx)
    try:
        request = DisplayEvaluationRequest(
            model_id=model_id, filter_expression=filter_expression
        )
        response = DisplayEvaluationCommand(service).execute(request)
        _echo(
            render_evaluation_summary(
                response.evaluation_id, response.threshold, response.entry
            )
        )
    except ExplorerError as e:
        _fail("displaying evaluation", e)


@app.command("delete_model")
def delete_model(
    ctx: typer.Context,
    model_id: Annotated[str, typer.Argument(help="Id of the model")],
) -> None:
    """Delete a model and wait for the deletion to finish."""
    service = _service(ctx)
    try:
        console.print("Model deletion started...", markup=False, highlight=False)
        request = DeleteModelRequest(model_id=model_id)
        response = DeleteModelCommand(service).execute(request)
        _echo(render_deleted_model(response.model_id, response.operation))
    except ExplorerError as e:
        _fail("deleting model", e)


@app.command("get_operation_status")
def get_operation_status(
    ctx: typer.Context,
    operation_full_id: Annotated[
        str,
        typer.Argument(
            help="Full operation name, e.g. projects/P/locations/R/operations/O",
        ),
    ],
) -> None:
    """Show the status of a long-running operation."""
    service = _service(ctx)
    try:
        request = GetOperationStatusRequest(operation_name=operation_full_id)
        response = GetOperationStatusCommand(service).execute(request)
        _echo(render_operation(response.operation))
    except ExplorerError as e:
        _fail("getting operation status", e)


@app.command("list_operations_status")
def list_operations_status(
    ctx: typer.Context,
    filter_expression: Annotated[
        str,
        typer.Argument(
            metavar="[FILTER]",
            help="Filter expression passed to the service",
        ),
    ] = "",
) -> None:
    """List the long-running operations of the configured project and region."""
    service = _service(ctx)
    try:
        request = ListOperationsStatusRequest(filter_expression=filter_expression)
        response = ListOperationsStatusCommand(service).execute(request)
        _echo(render_operation_list(response.operations))
    except ExplorerError as e:
        _fail("listing operations", e)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
