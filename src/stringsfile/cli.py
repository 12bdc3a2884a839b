"""CLI entry point for the .strings parser."""

import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import ParserConfig
from .strings import StringsParser
from .syntax import ParseError, parse as parse_document


DEMO_DOCUMENT = '''/* Menu item to make the current document plain text */
"Make Plain Text" = "In reinen Text umwandeln";
/* Menu item to make the current document rich text */
"Make Rich Text" = "In formatierten Text umwandeln";
'''

# Same document with a stray unescaped quote inside the first value
DEMO_DOCUMENT_EMBEDDED_QUOTE = '''/* Menu item to make the current document plain text */
"Make Plain Text" = "In reinen" Text umwandeln";
/* Menu item to make the current document rich text */
"Make Rich Text" = "In formatierten Text umwandeln";
'''


def _report_error(error: ParseError, source_name: str) -> None:
    click.secho(f"Error in {source_name}:", fg='red', err=True)
    click.secho(error.format_with_context(), fg='red', err=True)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def cli(verbose: bool):
    """Parse Apple .strings localization files."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--raw', is_flag=True, help='Show keys and values exactly as written')
@click.option('--encoding', default=None, help='File encoding (default: auto-detect)')
def parse(file: Path, raw: bool, encoding: Optional[str]):
    """Parse and display entries from a .strings file.

    FILE is the path to the .strings file to parse.
    """
    config = ParserConfig.raw() if raw else ParserConfig()
    config.encoding = encoding
    parser = StringsParser(config)

    try:
        entries = parser.parse_file(file)
    except ParseError as exc:
        _report_error(exc, str(file))
        raise SystemExit(1)
    except LookupError as exc:
        click.secho(f"Error: {exc}", fg='red', err=True)
        raise SystemExit(1)
    except UnicodeDecodeError as exc:
        click.secho(f"Error in {file}: cannot decode as {exc.encoding}: {exc.reason}", fg='red', err=True)
        raise SystemExit(1)

    if not entries:
        click.secho("No entries found.", fg='yellow')
        return

    click.echo(f"Entries ({len(entries)} total):\n")

    for entry in entries:
        if entry.comment:
            click.secho(f"/* {entry.comment} */", fg='cyan')
        if raw:
            click.echo(f'{entry.key} = {entry.value};')
        else:
            click.echo(f'{entry.key!r} = {entry.value!r}')
        click.echo()


@cli.command()
def demo():
    """Parse two built-in sample documents and show the results."""
    samples = [
        ("well-formed sample", DEMO_DOCUMENT),
        ("sample with an embedded quote", DEMO_DOCUMENT_EMBEDDED_QUOTE),
    ]
    failed = False

    for name, text in samples:
        click.secho(f"{name}:", bold=True)
        try:
            mapping = parse_document(text)
        except ParseError as exc:
            _report_error(exc, name)
            failed = True
        else:
            for key, value in mapping.items():
                click.echo(f"  {key} -> {value}")
        click.echo()

    if failed:
        click.secho("Demo finished; the second sample is expected to fail.", fg='cyan')


if __name__ == '__main__':
    cli()
