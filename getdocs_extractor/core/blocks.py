"""
注释块收集

把源码中的注释组拆分为注释块：同一注释组内，相邻两行注释之间
如果隔着空行（行号不连续），就拆成两个块。例如

    // Foo:: interface
    //
    //   foo:: number

    // ::-
    class Bar {}

中的 Foo 和 Bar 是两个独立的块，Foo 不会被当作类的注释。
"""

import logging
from dataclasses import dataclass

from getdocs_extractor.source.js_ast import SourceTree

logger = logging.getLogger(__name__)


@dataclass
class CommentBlock:
    """
    注释块

    Attributes:
        lines: 注释文本行
        element: 关联的程序元素下标
        start_line: 首行行号
    """
    lines: list[str]
    element: int
    start_line: int


def gather_comment_blocks(tree: SourceTree) -> list[CommentBlock]:
    """
    收集注释块并关联程序元素

    Args:
        tree: 源码结构

    Returns:
        按源码顺序排列的注释块
    """
    blocks: list[CommentBlock] = []

    for run in tree.comment_runs():
        current = None
        last_line_number = None
        for comment in run.comments:
            for line in comment.lines:
                if current is None or line.line_number != last_line_number + 1:
                    current = CommentBlock(lines=[], element=run.element, start_line=line.line_number)
                    blocks.append(current)
                current.lines.append(line.text)
                last_line_number = line.line_number

    logger.debug(f"Gathered {len(blocks)} comment blocks")
    return blocks
