"""
Main entry point for dotdata. Accessed by 'dotdata' in the command line.

Every command reads a JSON or YAML document and prints its result to stdout.
The input file is never modified; redirect the output to keep a change.
"""
from contextlib import contextmanager
from functools import update_wrapper
from pathlib import Path
from typing import Any
import click

from dotdata.core.data import Data
from dotdata.core.errors import DataError
from dotdata.core.report import describe
from dotdata.core.runtime import build_runtime, Runtime
from dotdata.core.settings import load_settings, OUTPUT_FORMATS, Settings
from dotdata.core.walker import ImportMode
from dotdata.utils.parse import dump_value, load_document, parse_value

FORMAT_CHOICE = click.Choice(OUTPUT_FORMATS, case_sensitive=False)
DOCUMENT = click.Path(exists=True, dir_okay=False, path_type=Path)


@contextmanager
def user_errors():
    """Report bad paths and unreadable documents as clean CLI errors."""
    try:
        yield
    except (DataError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def pass_runtime(f):
    """
    Decorator to pass a Runtime to Click commands that need it.
    Ensures a Runtime is created and passed as the first argument.
    """
    @click.pass_context
    def new_func(ctx: click.Context, *args, **kwargs):
        ctx.ensure_object(dict)
        rt = ctx.obj.get('rt')
        if rt is None:
            opts = ctx.obj.get('global_opts', {})  # user overrides
            with user_errors():
                rt = build_runtime(**opts)
            ctx.obj['rt'] = rt
        # call the function with the Runtime context
        return f(ctx.obj['rt'], *args, **kwargs)
    return update_wrapper(new_func, f)


def load_data(file: Path) -> Data:
    """Read the document named on the command line into a Data object."""
    input_format = click.get_current_context().find_root().obj.get('input_format')
    with user_errors():
        return Data(load_document(file, input_format))


def emit(rt: Runtime, value: Any) -> None:
    """Print a value in the configured output format."""
    click.echo(dump_value(value, rt.settings.output_format, rt.settings.indent))


@click.group()
@click.option('--input-format', type=FORMAT_CHOICE, default=None,
              help="Force the input document format instead of guessing from the file extension.")
@click.option('-o', '--output-format', type=FORMAT_CHOICE, default=None,
              help="Output format. Overrides settings and DOTDATA_OUTPUT_FORMAT.")
@click.option('--indent', type=click.IntRange(min=0), default=None,
              help="Indentation for output; 0 prints compact output.")
@click.option('--settings-dir', type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory holding settings.json.")
@click.option('-v', '--verbose', is_flag=True, default=False,
              help="Very detailed logging for debugging purposes.")
@click.version_option()
@click.pass_context
def main(ctx, input_format, output_format, indent, settings_dir, verbose):
    """dotdata: read and edit nested JSON/YAML documents with paths like a.b.c or a/b/c."""
    ctx.ensure_object(dict)
    ctx.obj['input_format'] = input_format
    ctx.obj['global_opts'] = {
        'settings_dir': settings_dir,
        'output_format': output_format.lower() if output_format else None,
        'indent': indent,
        'verbose': verbose,
    }


@main.command()
@pass_runtime
@click.argument("file", type=DOCUMENT)
@click.argument("path")
@click.option("--default", "default", default=None,
              help="Value to print when nothing exists at PATH (parsed like VALUE).")
def get(rt: Runtime, file: Path, path: str, default: str | None):
    """
    Print the value at PATH.

    Example: dotdata get config.yaml server.port
    """
    data = load_data(file)
    with user_errors():
        if default is None:
            value = data.get(path)
        else:
            value = data.get(path, parse_value(default))
    emit(rt, value)


@main.command()
@pass_runtime
@click.argument("file", type=DOCUMENT)
@click.argument("path")
def has(rt: Runtime, file: Path, path: str):
    """Print true/false depending on whether PATH exists. Exits 1 when it does not."""
    data = load_data(file)
    with user_errors():
        found = data.has(path)
    rt.logger.debug("has(%s) -> %s", path, found)
    click.echo("true" if found else "false")
    if not found:
        click.get_current_context().exit(1)


@main.command(name="set")
@pass_runtime
@click.argument("file", type=DOCUMENT)
@click.argument("path")
@click.argument("value")
def set_(rt: Runtime, file: Path, path: str, value: str):
    """
    Set PATH to VALUE and print the updated document.

    Example: dotdata set config.json server.port 8080
    """
    data = load_data(file)
    with user_errors():
        data.set(path, parse_value(value))
    emit(rt, data.export())


@main.command()
@pass_runtime
@click.argument("file", type=DOCUMENT)
@click.argument("path")
@click.argument("value")
def append(rt: Runtime, file: Path, path: str, value: str):
    """Append VALUE to the list at PATH and print the updated document."""
    data = load_data(file)
    with user_errors():
        data.append(path, parse_value(value))
    emit(rt, data.export())


@main.command()
@pass_runtime
@click.argument("file", type=DOCUMENT)
@click.argument("path")
def remove(rt: Runtime, file: Path, path: str):
    """Remove PATH (if present) and print the updated document."""
    data = load_data(file)
    with user_errors():
        data.remove(path)
    emit(rt, data.export())


@main.command()
@pass_runtime
@click.argument("file", type=DOCUMENT)
@click.argument("other", type=DOCUMENT)
@click.option("--mode", type=click.Choice([m.value for m in ImportMode]),
              default=ImportMode.REPLACE.value, show_default=True,
              help="replace: OTHER wins; preserve: FILE wins; merge: like replace but lists are concatenated.")
def merge(rt: Runtime, file: Path, other: Path, mode: str):
    """Deep-merge OTHER into FILE and print the result."""
    data = load_data(file)
    source = load_data(other)
    with user_errors():
        data.import_data(source, ImportMode(mode))
    rt.logger.debug("Merged %s into %s (mode=%s)", other, file, mode)
    emit(rt, data.export())


@main.command()
@pass_runtime
@click.argument("file", type=DOCUMENT)
@click.argument("path")
def inspect(rt: Runtime, file: Path, path: str):
    """Describe the node at PATH: whether it exists, its kind and size."""
    data = load_data(file)
    with user_errors():
        info = describe(data, path)
    emit(rt, info.model_dump(mode="json"))


# --- Settings ---

@main.group()
def settings():
    """Show or change saved CLI settings."""


@settings.command(name="show")
@pass_runtime
def settings_show(rt: Runtime):
    """Print the effective settings."""
    emit(rt, rt.settings.to_dict())


@settings.command(name="set")
@pass_runtime
@click.argument("key")
@click.argument("value")
def settings_set(rt: Runtime, key: str, value: str):
    """
    Save a setting.

    Example: dotdata settings set output_format yaml
    """
    # Start from the saved file, not from this invocation's overrides
    current = Data(load_settings(rt.settings_dir).to_dict())
    with user_errors():
        if not current.has(key):
            raise ValueError(f"Unknown setting '{key}'. Valid options: {', '.join(current)}")
        current.set(key, parse_value(value))
        try:
            new_settings = Settings.from_dict(current.export())
        except TypeError as e:
            raise ValueError(f"Invalid value for '{key}': {value}") from e
    rt.save_settings(new_settings)
    emit(rt, new_settings.to_dict())


if __name__ == "__main__":
    main()
