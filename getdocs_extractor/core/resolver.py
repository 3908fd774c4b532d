"""
名称/类型推导

声明名称和类型可以在注释中显式给出，也可以从关联的程序元素推导：

| 元素             | 推导名称         | 推导类型              |
|------------------|------------------|-----------------------|
| 类声明           | 类名             | Class                 |
| 函数声明         | 函数名           | Function(parameters=[]) |
| 方法定义         | 方法名           | -                     |
| this.<field> = … | field            | -                     |
| 单变量声明       | 变量名           | Any                   |
"""

from typing import Optional

from getdocs_extractor.errors import (
    UnresolvableNameError,
    UnresolvableTypeError,
    UnsupportedParameterError,
)
from getdocs_extractor.source.models import ElementKind, SourceElement
from getdocs_extractor.typespec import (
    AnyType,
    ClassType,
    FunctionType,
    InterfaceType,
    TypeNode,
    parse_type,
)

INTERFACE_TYPE_SPEC = "interface"


def resolve_name(identifier: Optional[str], element: SourceElement) -> str:
    """
    确定声明名称

    Args:
        identifier: 注释中显式给出的名称
        element: 关联的程序元素

    Returns:
        声明名称

    Raises:
        UnresolvableNameError: 元素无法提供名称
    """
    if identifier:
        return identifier

    if element.kind is ElementKind.VARIABLE:
        if len(element.declarators) != 1:
            raise UnresolvableNameError(
                f"Unable to deal with a multi-variable declaration {element.describe()}."
            )
        name = element.declarators[0]
    elif element.kind in (ElementKind.CLASS, ElementKind.FUNCTION, ElementKind.METHOD, ElementKind.ASSIGNMENT):
        name = element.name
    else:
        raise UnresolvableNameError(f"Unable to derive declaration name from a {element.describe()}.")

    if not name:
        raise UnresolvableNameError(f"Unable to derive declaration name from a {element.describe()}.")
    return name


def resolve_type(type_spec: str, element: SourceElement) -> TypeNode:
    """
    确定声明类型

    Args:
        type_spec: 注释中的类型签名（可能为空）
        element: 关联的程序元素

    Returns:
        类型节点

    Raises:
        UnresolvableTypeError: 签名为空且元素无法提供类型
        TypeSpecSyntaxError: 签名格式错误
    """
    if type_spec:
        if type_spec == INTERFACE_TYPE_SPEC:
            return InterfaceType()
        return parse_type(type_spec)

    if element.kind is ElementKind.CLASS:
        return ClassType()
    if element.kind is ElementKind.FUNCTION:
        return FunctionType(parameters=[])
    if element.kind is ElementKind.VARIABLE:
        return AnyType()
    raise UnresolvableTypeError(f"Unable to derive declaration type from a {element.describe()}.")


def backfill_parameter_names(type_node: TypeNode, element: SourceElement) -> None:
    """
    用方法的形参名补全签名中省略的参数名

    仅对关联到方法定义的 Function 类型生效，按位置对应。

    Raises:
        UnsupportedParameterError: 需要补全的位置是解构或剩余参数
    """
    if element.kind is not ElementKind.METHOD or not isinstance(type_node, FunctionType):
        return

    for position, parameter in enumerate(type_node.parameters):
        if parameter.name or position >= len(element.params):
            continue
        source_parameter = element.params[position]
        if source_parameter.name is None:
            raise UnsupportedParameterError(
                f"Unable to derive the name of a '{source_parameter.node_type}' parameter "
                f"of method '{element.name}' at line {element.start_line}."
            )
        parameter.name = source_parameter.name
