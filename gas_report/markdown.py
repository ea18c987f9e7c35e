"""Renders table rows as a GitHub flavored markdown table."""

from typing import Sequence

from jinja2 import Environment

from gas_report.jinja import get_jinja_env

TABLE_TEMPLATE = "markdown_table.md.jinja"


def _cell(value: str | None) -> str:
    # Pipes would split the cell.
    return "" if value is None else str(value).replace("|", "\\|")


def render_markdown_table(rows: Sequence[Sequence[str | None]], env: Environment | None = None) -> str:
    """Renders rows as a markdown table. The first row is the header.

    Parameters
    ----------
    rows : Sequence[Sequence[str | None]]
        The header row followed by the body rows. None renders as an empty cell.
    env : Environment | None, optional
        The jinja environment to load the table template from.

    Returns
    -------
    str
        The markdown table, one line per row plus the separator line.
    """
    env = env or get_jinja_env()
    header, *body = [[_cell(value) for value in row] for row in rows]
    template = env.get_template(TABLE_TEMPLATE)
    return template.render(header=header, rows=body).rstrip("\n")
