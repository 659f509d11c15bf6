"""Result exporters."""

from .delimited import export_to_csv
from .excel import export_to_excel

__all__ = ["export_to_csv", "export_to_excel"]
