"""Markdown gas comparison tables for the HashMap, EnumerableMap and Mapping contracts."""

from .config import ReportConfig, get_report_config
from .errors import ForgeCommandError, GasReportError, GasReportParseError
from .markdown import render_markdown_table
from .report import json_report, snapshot_report
from .results import GasResults, format_gas
from .table import build_table
