"""
Source Layer - 源码结构层

使用 esprima 解析 JavaScript，提供程序元素查询和注释附着。
"""

from getdocs_extractor.source.models import (
    ElementKind,
    Placement,
    ParseConfig,
    SourceParameter,
    SourceElement,
    CommentLine,
    SourceComment,
    CommentRun,
)
from getdocs_extractor.source.js_ast import SourceTree, SourceTreeBuilder, parse_source

__all__ = [
    # models
    "ElementKind",
    "Placement",
    "ParseConfig",
    "SourceParameter",
    "SourceElement",
    "CommentLine",
    "SourceComment",
    "CommentRun",
    # js_ast
    "SourceTree",
    "SourceTreeBuilder",
    "parse_source",
]
