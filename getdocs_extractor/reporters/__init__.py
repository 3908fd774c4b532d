"""
Reporters Layer - 报告层

包含 Rich 终端报告器和 JSON 报告器。
"""

from getdocs_extractor.reporters.base import Reporter, FileDeclarations
from getdocs_extractor.reporters.rich_reporter import RichReporter
from getdocs_extractor.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "FileDeclarations",
    "RichReporter",
    "JsonReporter",
]
