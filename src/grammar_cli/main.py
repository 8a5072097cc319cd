import logging
from pathlib import Path

import typer
from grammar_engine import GrammarEngine, registry

from .config import DEFAULT_CONFIG_FILE, LintSettings, RunConfig, Verbosity
from .errors import ExtraOperandError, GrammarLintError
from .log import configure_logging
from .runner import run

__version__ = "1.1.0"
PROG_NAME = "grammar-lint"

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Perform grammar checking on a text document, one line at a time.",
    epilog="With no FILE, or when FILE is -, read standard input.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _program_name(ctx: typer.Context) -> str:
    return ctx.find_root().info_name or PROG_NAME


def _version_callback(ctx: typer.Context, value: bool):
    if not value:
        return
    engine = GrammarEngine()
    typer.echo(f"{_program_name(ctx)} v{__version__}")
    typer.echo(f"grammar-engine v{engine.lib_version()}")
    typer.echo(f"grammar-engine-core v{engine.core_version()}")
    typer.echo("")
    typer.echo("This is free software: you are free to change and redistribute it.")
    typer.echo("There is NO WARRANTY, to the extent permitted by law.")
    raise typer.Exit()


def build_config(
    files: list[str],
    comment: str = "",
    delimiter: str = "",
    fix: bool = False,
    number: bool = False,
    document_output: str = "-",
    suggestion_output: str = "-",
    quiet: bool = False,
    silent: bool = False,
) -> RunConfig:
    """Validate operands and fold the flags into one RunConfig"""
    # Only one input; use `cat` to check several files at once
    if len(files) > 1:
        raise ExtraOperandError(files[1])

    if silent:
        verbosity = Verbosity.SILENT
    elif quiet:
        verbosity = Verbosity.QUIET
    else:
        verbosity = Verbosity.NORMAL

    return RunConfig(
        fix_requested=fix,
        number_lines=number,
        verbosity=verbosity,
        comment_prefixes=comment,
        delimiter=delimiter,
        input_path=files[0] if files else "-",
        output_path=document_output,
        suggestion_path=suggestion_output,
    )


@app.command()
def lint(
    ctx: typer.Context,
    files: list[str] = typer.Argument(None, metavar="[FILE]", help="Text file to check"),
    comment: str = typer.Option(
        "", "-c", "--comment", metavar="COMMENT", help="Characters that start comment lines (stored, not applied)"
    ),
    delimiter: str = typer.Option(
        "", "-d", "--delimiter", metavar="DELIMITER", help="Start suggestion lines with DELIMITER"
    ),
    fix: bool = typer.Option(False, "-f", "--fix-file", "--fix", help="Automatically apply suggestions"),
    number: bool = typer.Option(
        False, "-n", "--number-lines", "--number", help="Provide line:col number for each suggestion"
    ),
    document_output: str = typer.Option(
        "-", "-o", "--document-output", metavar="FILE", help="Output document text to FILE"
    ),
    suggestion_output: str = typer.Option(
        "-", "-O", "--suggestion-output", metavar="FILE", help="Output suggestions to FILE"
    ),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Do not print suggestions"),
    silent: bool = typer.Option(False, "-s", "--silent", help="Do not output anything"),
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to settings file"),
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print version information and exit",
    ),
):
    """Check each line of FILE and print suggestions for it"""
    prog = _program_name(ctx)
    try:
        config = build_config(
            files or [],
            comment=comment,
            delimiter=delimiter,
            fix=fix,
            number=number,
            document_output=document_output,
            suggestion_output=suggestion_output,
            quiet=quiet,
            silent=silent,
        )

        settings = LintSettings(config_file)
        configure_logging(settings.log_level)
        configure_logging(settings.log_level, "grammar_engine")
        if config.fix_requested:
            logger.warning("Automatic fixing is not supported yet; suggestions are only reported")

        engine = GrammarEngine(rules=settings.apply_to_registry(registry))
        status = run(config, engine)
    except GrammarLintError as exc:
        typer.echo(f"{prog}: {exc}", err=True)
        raise typer.Exit(code=exc.exit_code)

    raise typer.Exit(code=status.exit_code)


if __name__ == "__main__":
    app()
