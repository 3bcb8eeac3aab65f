import json
import sys
from pathlib import Path

import click

from .analyzer import SpecAnalyzer
from .cli_utils import configure_logging
from .config import AnalyzerConfig
from .errors import SwaggerCodegenError
from .model import SpecParser
from .report import ReportRenderer


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--tag", "-t", "tags", multiple=True, help="Only list operations of these tags")
@click.option("--no-header", is_flag=True, default=False, help="Omit the generation comment")
@click.option("--verbose", "-v", count=True, help="Increase logging verbosity")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
def swagger_codegen_kit(config, tags, no_header, verbose, path):
    """Analyze a decoded Swagger document and print the derived metadata report."""
    configure_logging(verbose)

    with open(path) as f:
        document = json.load(f)

    if config is not None:
        with open(config) as f:
            config = AnalyzerConfig.from_dict(json.load(f))
    else:
        config = AnalyzerConfig()

    try:
        spec = SpecParser(config).parse(document)
        result = SpecAnalyzer(spec, config).analyze()
    except SwaggerCodegenError as e:
        raise click.ClickException(str(e)) from e

    if tags:
        result.operations_by_tag = {tag: ops for tag, ops in result.operations_by_tag.items() if tag in tags}

    title = spec.info.get("title") or Path(path).stem
    click.echo(ReportRenderer(add_generation_comment=not no_header).render(result, title), nl=False)

    if result.has_errors:
        sys.exit(1)
