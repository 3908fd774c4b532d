"""
getdocs-extractor: 从 JavaScript 注释中提取 API 声明

    // Foo:: interface
    //
    //   bar:: (?Object) → ContentMatch

extract(source) 返回 Declaration 树，供文档渲染器使用。
"""

__version__ = "0.1.0"

from getdocs_extractor.core import extract, extract_method, extract_property
from getdocs_extractor.errors import (
    ExtractError,
    SourceSyntaxError,
    UnknownLineSyntaxError,
    CommentSpecError,
    UnresolvableNameError,
    UnresolvableTypeError,
    MalformedNestingError,
    UnsupportedParameterError,
    TypeSpecSyntaxError,
)
from getdocs_extractor.models import Declaration, declarations_to_json
from getdocs_extractor.source import ParseConfig, parse_source

__all__ = [
    "__version__",
    "extract",
    "extract_method",
    "extract_property",
    "Declaration",
    "declarations_to_json",
    "ParseConfig",
    "parse_source",
    # errors
    "ExtractError",
    "SourceSyntaxError",
    "UnknownLineSyntaxError",
    "CommentSpecError",
    "UnresolvableNameError",
    "UnresolvableTypeError",
    "MalformedNestingError",
    "UnsupportedParameterError",
    "TypeSpecSyntaxError",
]
