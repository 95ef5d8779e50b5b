import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from readmegen import generator
from readmegen.exceptions import ReadmegenError
from readmegen.generator.settings import DEFAULT_SETTINGS, Settings

try:
    __version__ = version("readmegen")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

DEFAULT_SOURCE_DIR = "src"
DEFAULT_TITLE = "Dirty ruby"
DEFAULT_OUTPUT_NAME = "README.md"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="READMEGEN_LOG_FILE",
)
@click.version_option(__version__, prog_name="readmegen")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


@cli.command()
@click.argument(
    "source_dir",
    default=DEFAULT_SOURCE_DIR,
    type=click.Path(file_okay=True, dir_okay=True),
)
@click.option(
    "--title",
    default=DEFAULT_TITLE,
    show_default=True,
    envvar="READMEGEN_TITLE",
    help="Title of the generated guide.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--toc/--no-toc",
    default=True,
    show_default=True,
    help="Include the table of contents.",
)
@click.option(
    "--language",
    default=DEFAULT_SETTINGS.code_language,
    show_default=True,
    help="Language tag of the code fences.",
)
@click.option(
    "--suffix",
    default=DEFAULT_SETTINGS.source_suffix,
    show_default=True,
    help="File name suffix of the annotated sources.",
)
@click.option(
    "--intro-name",
    default=DEFAULT_SETTINGS.intro_name,
    show_default=True,
    help="File name of chapter introductions.",
)
def generate(
    source_dir: str = DEFAULT_SOURCE_DIR,
    title: str = DEFAULT_TITLE,
    output_path: Optional[str] = None,
    toc: bool = True,
    language: str = DEFAULT_SETTINGS.code_language,
    suffix: str = DEFAULT_SETTINGS.source_suffix,
    intro_name: str = DEFAULT_SETTINGS.intro_name,
) -> None:
    """Generate a Markdown guide from a directory of annotated sources.

    Args:
        source_dir: Root directory of the annotated sources.
        title: Title of the generated guide.
        output_path: Optional file or directory path for the guide. If a
            directory is provided, the guide is written to ``README.md``
            inside it.
        toc: Include the table of contents after the title.
        language: Language tag placed after every opening code fence.
        suffix: File name suffix identifying annotated sources.
        intro_name: File name whose content introduces a chapter.
    """

    settings = Settings(
        code_language=language, source_suffix=suffix, intro_name=intro_name
    )

    try:
        content = generator.generate(
            Path(source_dir), title, settings=settings, toc=toc
        )
    except ReadmegenError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_path:
        final_path = Path(output_path)

        # If the provided path is a directory, build the file path inside it.
        if final_path.is_dir():
            final_path = final_path / DEFAULT_OUTPUT_NAME

        final_path.write_text(content, encoding="utf-8")
        logging.info(f"Wrote {final_path}")
    else:
        click.echo(content, nl=False)
