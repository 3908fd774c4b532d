"""
CLI Layer - 命令行接口层

提供命令行入口。
"""

from getdocs_extractor.cli.app import app, extract_files, version

__all__ = [
    "app",
    "extract_files",
    "version",
]
