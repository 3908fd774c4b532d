"""
类型节点定义

类型签名文法产生的节点，以及只能由源码结构推导出的程序级节点
（Class、Interface、Any）。所有节点都可以通过 to_dict() 序列化为
与渲染器约定的 camelCase 字典，未设置的可选字段不输出。
"""

from dataclasses import dataclass, field, fields
from typing import ClassVar, Optional, Union


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _plain(value):
    if isinstance(value, TypeNode):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


@dataclass
class TypeNode:
    """类型节点基类"""
    kind: ClassVar[str] = ""

    def to_dict(self) -> dict:
        """序列化为字典，跳过 None 和 False 字段"""
        data = {"kind": self.kind}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value is False:
                continue
            data[_camel(f.name)] = _plain(value)
        return data


@dataclass
class NameType(TypeNode):
    """具名类型，例如 Foo 或 Object<string>"""
    kind: ClassVar[str] = "Name"
    name: str
    type_arguments: Optional[list[TypeNode]] = None


@dataclass
class NullableType(TypeNode):
    """可空类型 ?T"""
    kind: ClassVar[str] = "Nullable"
    type: TypeNode


@dataclass
class ArrayType(TypeNode):
    """数组类型 [T]"""
    kind: ClassVar[str] = "Array"
    type: TypeNode


@dataclass
class ObjectField(TypeNode):
    kind: ClassVar[str] = "ObjectField"
    name: str
    type: TypeNode
    optional: bool = False


@dataclass
class ObjectType(TypeNode):
    """对象字面量类型 {a: T, b?: U}"""
    kind: ClassVar[str] = "Object"
    fields: list[ObjectField] = field(default_factory=list)


@dataclass
class FunctionParameter(TypeNode):
    """
    函数参数

    Attributes:
        type: 参数类型
        name: 参数名，签名中未写出时为 None（可由方法定义回填）
        optional: 是否为可选参数 (name?: T)
        rest: 是否为剩余参数 (...T)
    """
    kind: ClassVar[str] = "FunctionParameter"
    type: TypeNode
    name: Optional[str] = None
    optional: bool = False
    rest: bool = False


@dataclass
class FunctionType(TypeNode):
    """函数类型 (params) → R，返回类型可省略"""
    kind: ClassVar[str] = "Function"
    parameters: list[FunctionParameter] = field(default_factory=list)
    return_type: Optional[TypeNode] = None


@dataclass
class UnionType(TypeNode):
    kind: ClassVar[str] = "Union"
    types: list[TypeNode] = field(default_factory=list)


@dataclass
class LiteralType(TypeNode):
    """字符串或数字字面量类型"""
    kind: ClassVar[str] = "Literal"
    value: Union[str, int, float]


@dataclass
class ClassType(TypeNode):
    """
    类类型

    constructor_parameters 只来自名为 constructor 且关联到构造方法的子声明。
    """
    kind: ClassVar[str] = "Class"
    constructor_parameters: Optional[list[FunctionParameter]] = None


@dataclass
class InterfaceType(TypeNode):
    kind: ClassVar[str] = "Interface"


@dataclass
class AnyType(TypeNode):
    kind: ClassVar[str] = "Any"
