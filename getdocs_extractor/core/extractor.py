"""
声明提取入口

流程：
1. 解析源码，收集注释块
2. 分类每个块的注释行
3. 按缩进解析块中的声明
4. 将块头声明关联到父声明或作为顶层声明
"""

import logging
from typing import Optional

from getdocs_extractor.core.blocks import CommentBlock, gather_comment_blocks
from getdocs_extractor.core.lines import DeclarationLine, classify_line
from getdocs_extractor.core.linker import DeclarationLinker
from getdocs_extractor.core.parser import DeclarationParser
from getdocs_extractor.core.resolver import backfill_parameter_names, resolve_name, resolve_type
from getdocs_extractor.models import Declaration
from getdocs_extractor.source.js_ast import parse_source
from getdocs_extractor.source.models import ParseConfig, SourceElement

logger = logging.getLogger(__name__)


def _declaration_resolver(element: SourceElement):
    def resolve(line: DeclarationLine) -> Declaration:
        # 省略名称的声明作用于其后的程序元素，名称由元素推导
        declaration = Declaration(
            name=resolve_name(line.identifier, element),
            type=resolve_type(line.type_spec, element),
        )
        if line.type_spec:
            declaration.type_spec = line.type_spec
        backfill_parameter_names(declaration.type, element)
        return declaration

    return resolve


def _parse_block(block: CommentBlock, element: SourceElement, linker: DeclarationLinker) -> int:
    lines = [classify_line(text) for text in block.lines]
    parser = DeclarationParser(lines, _declaration_resolver(element))
    count = 0
    for declaration in parser.parse_block():
        linker.link(declaration, element.index)
        count += 1
    return count


def extract(source: str, config: Optional[ParseConfig] = None) -> list[Declaration]:
    """
    从 JavaScript 源码注释中提取声明

    Args:
        source: 源码文本
        config: 解析配置

    Returns:
        顶层声明列表（源码顺序）

    Raises:
        ExtractError: 源码或注释格式错误，整个提取中止
    """
    tree = parse_source(source, config)
    linker = DeclarationLinker(tree)

    for block in gather_comment_blocks(tree):
        element = tree.element(block.element)
        count = _parse_block(block, element, linker)
        if count:
            logger.debug(f"Block at line {block.start_line}: {count} declaration(s) for {element.describe()}")
        else:
            logger.debug(f"Block at line {block.start_line}: documentation only")

    return linker.declarations
