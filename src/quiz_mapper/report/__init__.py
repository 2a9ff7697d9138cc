"""Report writers."""

from .report_writer import write_reports, write_reports_json, write_reports_excel

__all__ = ["write_reports", "write_reports_json", "write_reports_excel"]
