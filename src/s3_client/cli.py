"""Command-line interface for s3-client.

Upload a file, list the bucket, or delete an object:

    s3-client -file photo.png -directory pics
    s3-client -list
    s3-client -delete pics/photo.png

Exactly one action runs per invocation. When several are given, -list wins
over -delete, which wins over -file.
"""

from typing import Annotated, Literal, Optional

import typer

from . import __version__
from .config_loader import load_settings
from .core import get_logger
from .core.exceptions import S3ClientError, UploadCancelled
from .core.observability import setup_logging
from .objectstorage import S3ClientManager, S3ObjectStore
from .operations import delete_object, list_objects, upload_file

logger = get_logger(__name__)

Action = Literal["list", "delete", "upload"]

NO_ACTION_MESSAGE = (
    "No file specified for upload. Use -file to specify a file or -list to "
    "list bucket contents."
)

app = typer.Typer(
    name="s3-client",
    help="Upload, list and delete files in an S3-compatible bucket.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-client {__version__}")
        raise typer.Exit()


def prompt_confirm(prompt: str) -> bool:
    """Ask on the console; only 'y' or 'yes' counts as agreement."""
    try:
        response = typer.prompt(
            prompt, default="", show_default=False, prompt_suffix=" > "
        )
    except typer.Abort:
        return False
    return response.strip().lower() in ("y", "yes")


def select_action(
    list_files: bool, delete: Optional[str], file: Optional[str]
) -> Optional[Action]:
    """Pick the single action to run from the parsed flags."""
    if list_files:
        return "list"
    if delete:
        return "delete"
    if file:
        return "upload"
    return None


@app.command(context_settings={"help_option_names": ["-help", "--help", "-h"]})
def main(
    file: Annotated[
        Optional[str],
        typer.Option("-file", "--file", help="Path to the file to upload"),
    ] = None,
    directory: Annotated[
        Optional[str],
        typer.Option(
            "-directory",
            "--directory",
            help="Directory in the bucket to upload the file to",
        ),
    ] = None,
    list_files: Annotated[
        bool, typer.Option("-list", "--list", help="List files in the bucket")
    ] = False,
    delete: Annotated[
        Optional[str],
        typer.Option(
            "-delete", "--delete", help="Path of the file to delete from the bucket"
        ),
    ] = None,
    overwrite: Annotated[
        bool,
        typer.Option(
            "-overwrite",
            "--overwrite",
            help="Overwrite the file if it already exists in the bucket",
        ),
    ] = False,
    force_path_style: Annotated[
        bool,
        typer.Option(
            "-force-path-style",
            "--force-path-style",
            help="Address objects as endpoint/bucket/key",
        ),
    ] = False,
    config: Annotated[
        Optional[str],
        typer.Option("-config", "--config", help="Path to the configuration file"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("-v", "--verbose", help="Enable verbose output")
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "-version",
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version.",
        ),
    ] = None,
) -> None:
    """
    Upload, list and delete files in an S3-compatible bucket.

    Settings are read from -config, ./s3config.toml or
    ~/.config/s3-client/s3config.toml, in that order.
    """
    if verbose:
        setup_logging("DEBUG")

    action = select_action(list_files, delete, file)
    if action is None:
        typer.echo(NO_ACTION_MESSAGE)
        raise typer.Exit(1)

    logger.debug("Action selected", action=action)

    try:
        client_settings = load_settings(config)
        manager = S3ClientManager(client_settings, force_path_style=force_path_style)
        store = S3ObjectStore(manager.client, client_settings.bucket)

        if action == "list":
            typer.echo(f"Files in bucket '{client_settings.bucket}':")
            for item in list_objects(store):
                typer.echo(item.format())

        elif action == "delete":
            assert delete is not None
            key = delete_object(store, delete)
            typer.echo(f"Successfully deleted file: {key}")

        else:
            assert file is not None
            url = upload_file(
                store,
                client_settings,
                file,
                directory=directory,
                overwrite=overwrite,
                confirm=prompt_confirm,
            )
            if verbose:
                typer.echo(f"Uploaded file: {file}")
                typer.echo(f"Endpoint: {client_settings.endpoint or ''}")
            typer.echo(f"Successfully uploaded. File URL: {url}")

    except UploadCancelled as e:
        typer.echo(str(e))
        raise typer.Exit(0)
    except S3ClientError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
