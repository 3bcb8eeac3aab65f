"""
End-of-run diagnostics report.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from . import __version__
from .analyzer import AnalysisResult
from .cli_utils import reconstruct_command_line
from .utils import pluralize, snake_to_pascal_case

CURRENT_DIR = Path(__file__).parent


class ReportRenderer:
    """Renders an AnalysisResult as plain text."""

    def __init__(self, add_generation_comment: bool = True):
        self.add_generation_comment = add_generation_comment
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=True)
        self.jinja_env.filters["snake_to_pascal"] = snake_to_pascal_case
        self.jinja_env.filters["pluralize"] = pluralize
        with open(CURRENT_DIR / "templates" / "report.txt.jinja2") as f:
            self.template = self.jinja_env.from_string(f.read())

    def _generation_comment(self) -> str:
        if not self.add_generation_comment:
            return ""
        try:
            from .swagger_codegen_kit import swagger_codegen_kit as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "swagger_codegen_kit"
        return f"# Generated by swagger_codegen_kit v{__version__} : {command_line}"

    def render(self, result: AnalysisResult, title: str | None = None) -> str:
        return self.template.render(result=result, title=title, header=self._generation_comment())


def render_report(result: AnalysisResult, title: str | None = None, add_generation_comment: bool = False) -> str:
    """Render the diagnostics report of one analysis run."""
    return ReportRenderer(add_generation_comment).render(result, title)
