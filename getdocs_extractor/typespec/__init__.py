"""
Type Spec Layer - 类型签名层

解析注释中的类型签名并定义类型节点。
"""

from getdocs_extractor.typespec.nodes import (
    TypeNode,
    NameType,
    NullableType,
    ArrayType,
    ObjectField,
    ObjectType,
    FunctionParameter,
    FunctionType,
    UnionType,
    LiteralType,
    ClassType,
    InterfaceType,
    AnyType,
)
from getdocs_extractor.typespec.parser import parse_type, tokenize

__all__ = [
    # nodes
    "TypeNode",
    "NameType",
    "NullableType",
    "ArrayType",
    "ObjectField",
    "ObjectType",
    "FunctionParameter",
    "FunctionType",
    "UnionType",
    "LiteralType",
    "ClassType",
    "InterfaceType",
    "AnyType",
    # parser
    "parse_type",
    "tokenize",
]
