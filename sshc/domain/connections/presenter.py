"""
Table rendering for saved connections
"""
from io import StringIO

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...core.constants import TABLE_HEADERS
from .models import ConnectionStore

# Left/right padding per cell plus the four vertical rules of a 3-column table
_CELL_PADDING = 2
_BORDER_WIDTH = len(TABLE_HEADERS) + 1


def _table_width(store: ConnectionStore) -> int:
    widths = [cell_len(header) for header in TABLE_HEADERS]
    for key, record in store.items():
        for index, value in enumerate((key, record.username, record.hostname)):
            widths[index] = max(widths[index], cell_len(value))
    return sum(widths) + _CELL_PADDING * len(widths) + _BORDER_WIDTH


def render_table(store: ConnectionStore) -> str:
    """
    Render the store as a boxed table, one row per connection in store order.
    
    Cell values go through ``Text`` so brackets in labels are never read as
    markup, and the render width always fits the widest row so nothing wraps.
    """
    table = Table(box=box.DOUBLE_EDGE, show_lines=True, header_style="bold")
    for header in TABLE_HEADERS:
        table.add_column(header, no_wrap=True, overflow="ignore")
    
    for key, record in store.items():
        table.add_row(Text(key), Text(record.username), Text(record.hostname))
    
    buffer = StringIO()
    console = Console(
        file=buffer,
        width=_table_width(store),
        color_system=None,
        highlight=False,
        emoji=False,
    )
    console.print(table)
    return buffer.getvalue().rstrip("\n")
