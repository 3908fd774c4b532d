"""
Core Layer - 核心层

包含注释行分类、注释块收集、声明树解析、名称/类型推导和声明关联。
"""

from getdocs_extractor.core.lines import (
    classify_line,
    strip_comment_spec_prefix,
    DeclarationLine,
    DocumentationLine,
    EmptyLine,
    Line,
)
from getdocs_extractor.core.blocks import CommentBlock, gather_comment_blocks
from getdocs_extractor.core.parser import DeclarationParser
from getdocs_extractor.core.resolver import (
    resolve_name,
    resolve_type,
    backfill_parameter_names,
)
from getdocs_extractor.core.linker import DeclarationLinker
from getdocs_extractor.core.extractor import extract
from getdocs_extractor.core.specs import (
    extract_method,
    extract_property,
    SpecKind,
    MethodSpec,
    PropertySpec,
)

__all__ = [
    # lines
    "classify_line",
    "strip_comment_spec_prefix",
    "DeclarationLine",
    "DocumentationLine",
    "EmptyLine",
    "Line",
    # blocks
    "CommentBlock",
    "gather_comment_blocks",
    # parser
    "DeclarationParser",
    # resolver
    "resolve_name",
    "resolve_type",
    "backfill_parameter_names",
    # linker
    "DeclarationLinker",
    # extractor
    "extract",
    # specs
    "extract_method",
    "extract_property",
    "SpecKind",
    "MethodSpec",
    "PropertySpec",
]
