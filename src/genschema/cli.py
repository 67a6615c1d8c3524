"""Generate a JSON Schema (draft-07) from an example JSON or YAML document.

The input can be provided as an argument or piped in through stdin.
The output schema can be written to a file or printed to stdout.
"""

import importlib.metadata
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from genschema.config import SchemaConfig
from genschema.decode import decode_any, decode_json, decode_yaml
from genschema.errors import GenSchemaError
from genschema.infer import generate_schema
from genschema.util import read_bytes, write_bytes

logger = logging.getLogger("genschema")

app = typer.Typer(
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    help=__doc__,
)


class InputFormat(StrEnum):
    AUTO = "auto"
    JSON = "json"
    YAML = "yaml"


def detect_format(path: Path) -> InputFormat:
    """Pick the decoder from the file extension.

    Stdin and unknown extensions stay `AUTO`: JSON first, then YAML.
    """
    match path.suffix.lower():
        case ".json":
            return InputFormat.JSON
        case ".yaml" | ".yml":
            return InputFormat.YAML
        case _:
            return InputFormat.AUTO


_DECODERS = {
    InputFormat.AUTO: decode_any,
    InputFormat.JSON: decode_json,
    InputFormat.YAML: decode_yaml,
}


def _version_callback(show: bool) -> None:
    if show:
        name = "genschema"
        version = importlib.metadata.version(name)
        print(f"{name} {version}")
        sys.exit()


@app.command(help=__doc__)
def main(
    input: Annotated[
        Path,
        typer.Argument(help="Input JSON/YAML file. Use '-' for stdin.", allow_dash=True),
    ] = Path("-"),
    output: Annotated[
        Path,
        typer.Argument(help="Output schema file. Use '-' for stdout.", allow_dash=True),
    ] = Path("-"),
    format: Annotated[
        InputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Input format. 'auto' uses the file extension, or tries JSON then"
            " YAML.",
        ),
    ] = InputFormat.AUTO,
    id: Annotated[str, typer.Option("--id", help="$id of the schema.")] = "",
    additional_properties: Annotated[
        bool,
        typer.Option(help="Allow objects to have properties not seen in the input."),
    ] = False,
    require_all: Annotated[
        bool, typer.Option(help="Mark every property of an object as required.")
    ] = True,
    indent: Annotated[
        int | None,
        typer.Option(help="Indent the output by this many spaces. Compact if unset."),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Print debug logs.")
    ] = False,
    _: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if format is InputFormat.AUTO:
        format = detect_format(input)
    logger.debug("Reading %s as %s", input, format)

    config = SchemaConfig(
        id=id,
        additional_properties=additional_properties,
        require_all_properties=require_all,
    )
    try:
        raw = read_bytes(input)
        decode = _DECODERS[format]
        schema = generate_schema(decode(raw), config)
        write_bytes(schema.marshal(indent=indent), output)
    except (GenSchemaError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
