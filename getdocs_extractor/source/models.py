"""
源码结构数据模型

程序元素以数组（arena）形式存储，元素之间通过下标引用，
下标即元素在先序遍历中的位置，在一次解析内稳定唯一。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Optional


class ElementKind(Enum):
    """与名称/类型推导相关的程序元素种类"""
    PROGRAM = "program"
    CLASS = "class"
    FUNCTION = "function"
    METHOD = "method"
    VARIABLE = "variable"
    ASSIGNMENT = "assignment"
    OTHER = "other"


class Placement(Enum):
    """注释相对于所附着元素的位置"""
    LEADING = "leading"
    TRAILING = "trailing"
    DANGLING = "dangling"


@dataclass
class ParseConfig:
    """
    解析配置

    Attributes:
        source_type: module 按 ES 模块解析（支持 import/export），script 按普通脚本解析
        tolerant: 是否容忍可恢复的语法错误
    """
    source_type: Literal["module", "script"] = "module"
    tolerant: bool = False


@dataclass
class SourceParameter:
    """
    形参

    Attributes:
        node_type: 参数节点类型 (Identifier, AssignmentPattern, ObjectPattern...)
        name: 参数名，仅 Identifier 和 AssignmentPattern 可得
    """
    node_type: str
    name: Optional[str] = None


@dataclass
class SourceElement:
    """
    程序元素

    Attributes:
        index: 在 arena 中的下标
        node_type: esprima 节点类型
        kind: 元素种类
        start: 起始字符偏移
        end: 结束字符偏移
        start_line: 起始行号 (1-based)
        end_line: 结束行号 (1-based)
        parent: 父元素下标，Program 为 None
        children: 子元素下标（源码顺序）
        name: 类名、函数名、方法名或 this.<field> 的字段名
        params: 函数或方法的形参
        declarators: 变量声明中各声明符的名称
        declaration: export 语句包裹的声明元素下标
    """
    index: int
    node_type: str
    kind: ElementKind
    start: int
    end: int
    start_line: int
    end_line: int
    parent: Optional[int] = None
    children: list[int] = field(default_factory=list)
    name: Optional[str] = None
    params: list[SourceParameter] = field(default_factory=list)
    declarators: list[Optional[str]] = field(default_factory=list)
    declaration: Optional[int] = None

    def describe(self) -> str:
        """用于错误消息的简短描述"""
        return f"'{self.node_type}' at line {self.start_line}"


@dataclass
class CommentLine:
    """注释中的一个物理行"""
    text: str
    line_number: int


@dataclass
class SourceComment:
    """
    源码注释

    Attributes:
        block: 是否为块注释 /* */
        value: 去掉注释标记后的文本
        start: 起始字符偏移
        end: 结束字符偏移
        start_line: 起始行号
        end_line: 结束行号
        element: 所附着的元素下标
        placement: 附着位置
    """
    block: bool
    value: str
    start: int
    end: int
    start_line: int
    end_line: int
    element: int = 0
    placement: Placement = Placement.DANGLING

    @property
    def lines(self) -> list[CommentLine]:
        """按物理行拆分注释文本"""
        return [
            CommentLine(text=text.rstrip("\r"), line_number=self.start_line + offset)
            for offset, text in enumerate(self.value.split("\n"))
        ]


@dataclass
class CommentRun:
    """附着在同一元素同一位置上的一组连续注释"""
    element: int
    placement: Placement
    comments: list[SourceComment] = field(default_factory=list)
