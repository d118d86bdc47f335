"""Command-line entry point: ``hilite FILENAME``."""

import click
from loguru import logger

from hilite.driver import encode_output, highlight_file
from hilite.errors import SourceOpenError
from hilite.ux.messages import format_error_message


def _write(rendered: str) -> None:
    # Bytes go straight to the binary stream, so click never strips the
    # escape sequences when stdout is not a terminal.
    click.echo(encode_output(rendered), nl=False)


@click.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.argument("filename", required=False)
@click.pass_context
def main(ctx: click.Context, filename: str | None) -> None:
    """Print FILENAME with keywords, strings, comments and numbers colored.

    The language is chosen from the file extension: cpp, hpp, c and h use
    the C family rules, py uses the Python rules. Other files are printed
    unchanged.
    """
    if filename is None:
        program = ctx.find_root().info_name or "hilite"
        click.echo(format_error_message("usage", program=program), err=True)
        ctx.exit(1)

    try:
        highlight_file(filename, _write)
    except SourceOpenError as e:
        logger.debug(f"Aborting: {e}")
        raise click.ClickException(format_error_message("cannot_open", filename=e.filename)) from None


if __name__ == "__main__":
    main()
