"""
报告器基类 - 定义报告器接口
"""

from dataclasses import dataclass, field
from typing import Protocol

from getdocs_extractor.models import Declaration


@dataclass
class FileDeclarations:
    """
    单个文件的提取结果

    Attributes:
        path: 文件路径
        declarations: 顶层声明
    """
    path: str
    declarations: list[Declaration] = field(default_factory=list)


class Reporter(Protocol):
    """报告器协议"""

    def report(self, results: list[FileDeclarations]) -> None:
        """生成报告"""
        ...
