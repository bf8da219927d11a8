import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from artex import extractor
from artex.errors import ArtexError
from artex.extractor import ArticleDocument
from artex.highlight import parse_keywords, unique_keywords
from artex.serialize import dumps_article, file_stem
from artex.translate import (
    GoogleTranslator,
    translate_article,
    translate_keywords,
)
from artex.xlsx import write_workbook

try:
    __version__ = version("artex")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

# Mapping from format names to file extensions.
EXTENSIONS = {"json": ".json", "yaml": ".yaml", "xlsx": ".xlsx"}


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="ARTEX_LOG_FILE",
)
@click.version_option(__version__, prog_name="artex")
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


def _load_article(
    url: Optional[str], file: Optional[str], cache_dir: Optional[str]
) -> ArticleDocument:
    """Extract the article from a URL or a local HTML file.

    Args:
        url: Address of the article page.
        file: Path of an HTML file, ``-`` for standard input.
        cache_dir: Directory used to cache downloaded HTML files.

    Returns:
        The extracted article.
    """

    if bool(url) == bool(file):
        raise click.UsageError("Provide either a URL or --file.")

    if file:
        if file == "-":
            html = sys.stdin.read()
        else:
            html = Path(file).read_text(encoding="utf-8")
        return extractor.extract_article(html)

    cache_path = Path(cache_dir) if cache_dir else None
    try:
        return extractor.fetch_article(url or "", cache_path)
    except ArtexError as exc:
        raise click.ClickException(str(exc)) from exc


def _write_output(
    article: ArticleDocument,
    output_path: Optional[str],
    output_format: str,
    keywords: list[str],
    source: Optional[str],
) -> None:
    """Write ``article`` to the console or to a file.

    Args:
        article: Article to write.
        output_path: Optional file or directory path. If a directory is
            provided, the file name is generated from the article title.
        output_format: Format of the written data.
        keywords: Keywords emphasized in workbook output.
        source: Address the article was read from, if known.
    """

    final_path: Optional[Path] = None
    if output_path:
        final_path = Path(output_path)

        # If the provided path is a directory, build the file path inside it.
        if final_path.is_dir():
            name = file_stem(article.title) + EXTENSIONS[output_format]
            final_path = final_path / name

    if output_format == "xlsx":
        if final_path is None:
            raise click.UsageError("Output file is required for xlsx format.")

        write_workbook(article, final_path, keywords, source=source)
        return

    content = dumps_article(article, output_format)
    if final_path:
        final_path.write_text(content, encoding="utf-8")
    else:
        click.echo(content)


def output_options(func):  # type: ignore[no-untyped-def]
    """Attach the input and output options shared by the commands."""

    options = [
        click.argument("url", required=False),
        click.option(
            "--file",
            type=click.Path(dir_okay=False, allow_dash=True),
            default=None,
            help="Read HTML from FILE instead of a URL ('-' for stdin).",
        ),
        click.option(
            "--cache-dir",
            type=click.Path(file_okay=False, dir_okay=True),
            default=None,
            envvar="ARTEX_CACHE_DIR",
            help="Directory for the HTML cache.",
        ),
        click.option(
            "--output",
            "output_path",
            type=click.Path(file_okay=True, dir_okay=True),
            default=None,
            help="Write output to FILE or DIRECTORY instead of the console.",
        ),
        click.option(
            "--format",
            "output_format",
            type=click.Choice(["json", "yaml", "xlsx"]),
            default="json",
            help="Output format.",
        ),
        click.option(
            "--keywords",
            default="",
            help="Comma separated keywords emphasized in xlsx output.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@cli.command()
@output_options
def extract(
    url: Optional[str] = None,
    file: Optional[str] = None,
    cache_dir: Optional[str] = None,
    output_path: Optional[str] = None,
    output_format: str = "json",
    keywords: str = "",
) -> None:
    """Extract the article of a web page.

    Args:
        url: Address of the article page.
        file: HTML file to read instead of downloading ``url``.
        cache_dir: Directory used to cache downloaded HTML files.
        output_path: Optional file or directory path for the article.
        output_format: Format of the extracted article.
        keywords: Comma separated keywords for workbook output.
    """

    article = _load_article(url, file, cache_dir)
    _write_output(
        article, output_path, output_format, parse_keywords(keywords), url
    )


@cli.command()
@output_options
@click.option(
    "--to",
    "target_language",
    required=True,
    help="Target language name or code, e.g. 'German' or 'de'.",
)
def translate(
    target_language: str,
    url: Optional[str] = None,
    file: Optional[str] = None,
    cache_dir: Optional[str] = None,
    output_path: Optional[str] = None,
    output_format: str = "json",
    keywords: str = "",
) -> None:
    """Extract the article of a web page and translate it.

    Args:
        target_language: Language to translate into.
        url: Address of the article page.
        file: HTML file to read instead of downloading ``url``.
        cache_dir: Directory used to cache downloaded HTML files.
        output_path: Optional file or directory path for the article.
        output_format: Format of the translated article.
        keywords: Comma separated keywords, translated into the target
            language and into the language of the article, and emphasized
            in workbook output.
    """

    article = _load_article(url, file, cache_dir)

    # Translate the article and the keywords with the same service.
    translator = GoogleTranslator()
    translated = translate_article(article, translator, target_language)
    keyword_list = parse_keywords(keywords)
    translated_keywords = translate_keywords(
        keyword_list, translator, target_language
    )

    # Keywords in the language of the original article.
    source_keywords: list[str] = []
    if keyword_list:
        source_keywords = translate_keywords(
            keyword_list,
            translator,
            translator.detect_language(article.title),
        )

    _write_output(
        translated,
        output_path,
        output_format,
        unique_keywords(translated_keywords + source_keywords),
        url,
    )
