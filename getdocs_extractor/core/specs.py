"""
方法/属性签名提取

针对单条注释的简化提取：注释位于类的方法之前时得到 MethodSpec，
位于构造方法中的 this.<field> = … 赋值之前时得到 PropertySpec。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from getdocs_extractor.core.lines import strip_comment_spec_prefix
from getdocs_extractor.errors import ExtractError
from getdocs_extractor.source.js_ast import SourceTree
from getdocs_extractor.source.models import ElementKind, SourceComment


class SpecKind(Enum):
    METHOD = "Method"
    PROPERTY = "Property"


@dataclass
class MethodSpec:
    """
    方法签名

    Attributes:
        name: 方法名
        spec: 去掉分隔符的类型签名
        parent: 所属类名
        param_names: 形参名（解构等无法命名的参数为 None）
    """
    name: str
    spec: str
    parent: str
    param_names: list[Optional[str]] = field(default_factory=list)
    kind: SpecKind = SpecKind.METHOD


@dataclass
class PropertySpec:
    """
    属性签名

    Attributes:
        name: 属性名（this.<field> 中的 field）
        spec: 去掉分隔符的类型签名
        parent: 所属类名
    """
    name: str
    spec: str
    parent: str
    kind: SpecKind = SpecKind.PROPERTY


def extract_method(tree: SourceTree, comment: SourceComment) -> Optional[MethodSpec]:
    """
    提取注释所在方法的签名

    Args:
        tree: 源码结构
        comment: 方法前的注释

    Returns:
        MethodSpec，注释不属于方法时返回 None

    Raises:
        ExtractError: 方法不在类声明中
    """
    method = tree.closest(comment.element, "MethodDefinition")
    if method is None:
        return None

    class_element = tree.enclosing_class(method.index)
    if class_element is None:
        raise ExtractError("Expected method to be in a class declaration.")

    return MethodSpec(
        name=method.name,
        spec=strip_comment_spec_prefix(comment.value),
        parent=class_element.name,
        param_names=[param.name for param in method.params],
    )


def extract_property(tree: SourceTree, comment: SourceComment) -> Optional[PropertySpec]:
    """
    提取注释所在 this.<field> 赋值的属性签名

    Args:
        tree: 源码结构
        comment: 赋值语句前的注释

    Returns:
        PropertySpec，注释不在类方法中的赋值语句上时返回 None
    """
    statement = tree.closest(comment.element, "ExpressionStatement")
    if statement is None or statement.kind is not ElementKind.ASSIGNMENT:
        return None
    if tree.closest(statement.index, "MethodDefinition") is None:
        return None

    class_element = tree.enclosing_class(statement.index)
    if class_element is None:
        return None

    return PropertySpec(
        name=statement.name,
        spec=strip_comment_spec_prefix(comment.value),
        parent=class_element.name,
    )
