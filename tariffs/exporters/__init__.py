"""Export modules for results."""

from .excel_exporter import build_excel, export_to_excel
from .print_exporter import export_to_print
from .rows import result_rows

__all__ = ["build_excel", "export_to_excel", "export_to_print", "result_rows"]
