"""Compare Typer app factory."""

from __future__ import annotations

from typing import Annotated, Any

import typer

from sbsdiff.api.compare.cmd_compare import cmd_compare
from sbsdiff.api.compare.collapse_context import collapse_context
from sbsdiff.api.compare.CompareConfig import CompareConfig
from sbsdiff.api.compare.CompareConfigError import CompareConfigError
from sbsdiff.api.compare.DiffModel import DiffModel

from ._get_display_format import _get_display_format
from ._handle_stage_result import _handle_stage_result
from .display.CLIDisplay import CLIDisplay
from .render_side_by_side import render_side_by_side


def compare() -> typer.Typer:
    """Create and configure the compare Typer app."""
    app = typer.Typer(
        name="compare",
        help="Compare two text files side by side",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        old_path: Annotated[str | None, typer.Argument(help="Old (left) file")] = None,
        new_path: Annotated[str | None, typer.Argument(help="New (right) file")] = None,
        ignore_whitespace: Annotated[
            bool, typer.Option("--ignore-whitespace", "-w", help="Ignore whitespace differences")
        ] = False,
        granularity: Annotated[
            str, typer.Option("--granularity", "-g", help="Highlight changes by: character or word")
        ] = "character",
        context_lines: Annotated[
            int, typer.Option("--context-lines", "-C", help="Unchanged lines shown around changes with --collapse")
        ] = 3,
        collapse: Annotated[bool, typer.Option("--collapse", help="Hide unchanged lines far from changes")] = False,
        line_numbers: Annotated[
            bool, typer.Option("--line-numbers/--no-line-numbers", help="Show line numbers")
        ] = True,
    ) -> None:
        """Compare OLD_PATH and NEW_PATH."""
        if old_path is None or new_path is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(1)

        try:
            config = CompareConfig.from_config_dict(
                {
                    "compare": {
                        "ignore_whitespace": ignore_whitespace,
                        "granularity": granularity,
                        "context_lines": context_lines,
                        "show_line_numbers": line_numbers,
                    }
                }
            )
        except CompareConfigError as exc:
            CLIDisplay().error("Invalid options", details="; ".join(exc.errors))
            raise typer.Exit(1) from exc

        display_format = _get_display_format(ctx)
        result_printer = None
        if display_format == "table":

            def print_table(output: dict[str, Any]) -> None:
                if output.get("model") is None:
                    return
                model = DiffModel.from_dict(output["model"])
                hunks = collapse_context(model, config.context_lines) if collapse else None
                render_side_by_side(model, CLIDisplay().console, hunks)

            result_printer = print_table

        _handle_stage_result(cmd_compare, display_format, result_printer)(old_path, new_path, config)

    return app
