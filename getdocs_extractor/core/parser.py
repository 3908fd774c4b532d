"""
声明树解析

按缩进解析一个注释块中的声明：

    // a:: foo
    //
    //   b:: foo
    //
    //     c:: foo

缩进严格大于父声明的声明行是它的属性，同级属性必须位于同一缩进列。
只有相对缩进有意义，不要求固定的缩进单位。
"""

from typing import Callable, Iterator, Optional

from getdocs_extractor.core.lines import DeclarationLine, DocumentationLine, EmptyLine, Line
from getdocs_extractor.errors import MalformedNestingError
from getdocs_extractor.models import Declaration

# 由声明行得到（尚无属性的）声明
Resolver = Callable[[DeclarationLine], Declaration]


class DeclarationParser:
    """
    单个注释块的递归下降解析器

    Attributes:
        lines: 已分类的注释行
        resolve: 从声明行构造声明的回调（负责名称/类型推导）
        pos: 当前行游标
    """

    def __init__(self, lines: list[Line], resolve: Resolver):
        self.lines = lines
        self.resolve = resolve
        self.pos = 0

    @property
    def line(self) -> Optional[Line]:
        return self.lines[self.pos] if self.pos < len(self.lines) else None

    def next_line(self) -> Optional[Line]:
        self.pos += 1
        return self.line

    def skip_until_empty(self) -> None:
        while self.line is not None and not isinstance(self.line, EmptyLine):
            self.next_line()

    def parse_block(self) -> Iterator[Declaration]:
        """
        逐个产出块中的顶层声明

        块中第一个非空行不是声明行时，整个块视为纯文档，不产出任何声明。
        """
        while isinstance(self.line, EmptyLine):
            self.next_line()
        if not isinstance(self.line, DeclarationLine):
            return

        while self.line is not None:
            if isinstance(self.line, DeclarationLine):
                yield self.parse_declaration()
            else:
                self.next_line()

    def parse_declaration(self) -> Declaration:
        head = self.line
        declaration = self.resolve(head)

        # 声明行之后到下一个空行为止都是文档段落
        self.next_line()
        self.skip_until_empty()

        while self.line is not None:
            line = self.line
            if isinstance(line, DocumentationLine):
                self.skip_until_empty()
            elif isinstance(line, EmptyLine):
                self.next_line()
            else:
                if line.indent > head.indent:
                    properties = self.parse_properties()
                    if properties:
                        declaration.properties = properties
                break

        return declaration

    def parse_properties(self) -> list[Declaration]:
        indent = self.line.indent
        members: list[Declaration] = []

        while self.line is not None:
            line = self.line
            if isinstance(line, EmptyLine):
                self.next_line()
            elif line.indent < indent:
                break
            elif isinstance(line, DocumentationLine):
                raise MalformedNestingError(f"Unexpected documentation line: {line.text}")
            elif line.indent == indent:
                members.append(self.parse_declaration())
            else:
                raise MalformedNestingError(
                    f"Declaration indented by {line.indent} does not line up with "
                    f"sibling declarations indented by {indent}: {line.identifier or ''}"
                )

        return members
