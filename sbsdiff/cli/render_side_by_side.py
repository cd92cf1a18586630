"""Render a comparison as two terminal columns."""

from collections.abc import Sequence

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from sbsdiff.api.compare.ChangeType import ChangeType
from sbsdiff.api.compare.collapse_context import Hunk
from sbsdiff.api.compare.DiffLine import DiffLine
from sbsdiff.api.compare.DiffModel import DiffModel

ADDED_BACKGROUND = "rgb(198,239,206)"
DELETED_BACKGROUND = "rgb(255,199,206)"
MODIFIED_BACKGROUND = "rgb(255,235,156)"

_LINE_STYLES = {
    ChangeType.UNCHANGED: Style(),
    ChangeType.BLANK: Style(),
    ChangeType.DELETED: Style(color="black", bgcolor=DELETED_BACKGROUND, strike=True),
    ChangeType.INSERTED: Style(color="black", bgcolor=ADDED_BACKGROUND, bold=True),
    ChangeType.MODIFIED: Style(color="black", bgcolor=MODIFIED_BACKGROUND),
}


def _cell_text(cell: DiffLine, is_new_side: bool) -> Text:
    """Styled text for one cell; modified cells highlight their own side's edits."""
    style = _LINE_STYLES[cell.change_type]

    if cell.change_type is ChangeType.MODIFIED and cell.sub_pieces is not None:
        highlight = ChangeType.INSERTED if is_new_side else ChangeType.DELETED
        background = ADDED_BACKGROUND if is_new_side else DELETED_BACKGROUND
        text = Text(style=style)
        for piece in cell.sub_pieces:
            if piece.change_type is highlight:
                text.append(piece.text, style=Style(bgcolor=background, bold=True))
            else:
                text.append(piece.text)
        return text

    if cell.change_type is ChangeType.BLANK:
        return Text("")
    return Text(cell.text or " ", style=style)


def _number(cell: DiffLine) -> Text:
    if cell.line is None:
        return Text("")
    return Text(str(cell.line.number), style="grey50")


def _skipped(count: int) -> Text:
    noun = "line" if count == 1 else "lines"
    return Text(f"⋯ {count} unchanged {noun}", style="dim italic")


def build_side_by_side_table(model: DiffModel, hunks: Sequence[Hunk] | None = None) -> Table:
    """Build the two-column table.

    Args:
        model: Comparison result
        hunks: Row ranges to show; None shows every row

    Returns:
        Rich table ready to print
    """
    table = Table(show_header=True, header_style="bold cyan", expand=True, show_lines=False)
    numbered = model.show_line_numbers
    if numbered:
        table.add_column("#", justify="right", no_wrap=True, width=5)
    table.add_column("Old", ratio=1, overflow="fold")
    if numbered:
        table.add_column("#", justify="right", no_wrap=True, width=5)
    table.add_column("New", ratio=1, overflow="fold")

    def add_row(old: DiffLine, new: DiffLine) -> None:
        cells = []
        if numbered:
            cells.append(_number(old))
        cells.append(_cell_text(old, is_new_side=False))
        if numbered:
            cells.append(_number(new))
        cells.append(_cell_text(new, is_new_side=True))
        table.add_row(*cells)

    def add_gap(count: int) -> None:
        gap = _skipped(count)
        table.add_row(*([Text(""), gap, Text(""), gap] if numbered else [gap, gap]))

    if hunks is None:
        for old, new in model.rows():
            add_row(old, new)
        return table

    shown_until = 0
    for hunk in hunks:
        if hunk.start > shown_until:
            add_gap(hunk.start - shown_until)
        for i in range(hunk.start, hunk.stop):
            add_row(model.old_side[i], model.new_side[i])
        shown_until = hunk.stop
    if shown_until < len(model):
        add_gap(len(model) - shown_until)

    return table


def render_side_by_side(model: DiffModel, console: Console, hunks: Sequence[Hunk] | None = None) -> None:
    """Print the comparison to ``console``."""
    if len(model) == 0:
        console.print(Text("Both documents are empty.", style="dim"))
        return
    console.print(build_side_by_side_table(model, hunks))
