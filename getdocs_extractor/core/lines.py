"""
注释行分类

将一行注释文本（已去掉 // 标记）分类为：
- DeclarationLine: <缩进><标识符?><:|::|:-|::-><类型签名>
- DocumentationLine: 缩进后的非空文本
- EmptyLine: 只包含空白
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from getdocs_extractor.errors import CommentSpecError, UnknownLineSyntaxError


# ============================================================
# 行模式
# ============================================================

DECLARATION_LINE_PATTERN = re.compile(r'^(\s*)([a-zA-Z._]*)(::?-? *)(.*)$')
DOCUMENTATION_LINE_PATTERN = re.compile(r'^(\s+)(\S.*)$')
EMPTY_LINE_PATTERN = re.compile(r'^(\s*)$')

# 类型签名前的分隔符：" : ", " :: ", ":-", "::-"
COMMENT_SPEC_PREFIX_PATTERN = re.compile(r'^( *::?-? *)?(.*)$')


@dataclass(frozen=True)
class DeclarationLine:
    """
    声明行

    Attributes:
        indent: 缩进宽度
        identifier: 显式声明的名称，省略时为 None
        type_spec: 分隔符之后的类型签名（可能为空）
    """
    indent: int
    type_spec: str
    identifier: Optional[str] = None


@dataclass(frozen=True)
class DocumentationLine:
    indent: int
    text: str


@dataclass(frozen=True)
class EmptyLine:
    indent: int


Line = Union[DeclarationLine, DocumentationLine, EmptyLine]


def classify_line(line: str) -> Line:
    """
    分类一行注释文本

    Args:
        line: 去掉注释标记的注释文本

    Returns:
        DeclarationLine、DocumentationLine 或 EmptyLine

    Raises:
        UnknownLineSyntaxError: 不匹配任何一种行语法
    """
    match = DECLARATION_LINE_PATTERN.match(line)
    if match:
        indent, identifier, _separator, type_spec = match.groups()
        return DeclarationLine(
            indent=len(indent),
            type_spec=type_spec,
            identifier=identifier or None,
        )

    match = DOCUMENTATION_LINE_PATTERN.match(line)
    if match:
        indent, text = match.groups()
        return DocumentationLine(indent=len(indent), text=text)

    match = EMPTY_LINE_PATTERN.match(line)
    if match:
        return EmptyLine(indent=len(match.group(1)))

    raise UnknownLineSyntaxError(f"Unknown syntax in comment: {line}")


def strip_comment_spec_prefix(prefixed_spec: str) -> str:
    """
    去掉类型签名前的 ' : ' 或 ' :: ' 等分隔符

    Args:
        prefixed_spec: 注释文本，例如 " :: (?Object) → ContentMatch"

    Returns:
        类型签名，例如 "(?Object) → ContentMatch"

    Raises:
        CommentSpecError: 文本无法拆分为分隔符和签名
    """
    match = COMMENT_SPEC_PREFIX_PATTERN.fullmatch(prefixed_spec)
    if not match:
        raise CommentSpecError(f"Invalid comment spec syntax '{prefixed_spec}'.")
    return match.group(2)
