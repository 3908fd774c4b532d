"""
类型签名解析器

将注释中的类型签名文本（例如 "(?Object) → ContentMatch"）解析为类型节点树。

文法：
    type    := single ('|' single)*
    single  := '?' single
             | '[' type ']'
             | '{' [field (',' field)*] '}'
             | '(' [param (',' param)*] ')' [('→' | '->') type]
             | STRING | NUMBER
             | NAME ['<' type (',' type)* '>']
    param   := ['...'] [NAME ['?'] ':'] type
    field   := NAME ['?'] ':' type
"""

import re
from dataclasses import dataclass
from typing import Optional

from getdocs_extractor.errors import TypeSpecSyntaxError
from getdocs_extractor.typespec.nodes import (
    ArrayType,
    FunctionParameter,
    FunctionType,
    LiteralType,
    NameType,
    NullableType,
    ObjectField,
    ObjectType,
    TypeNode,
    UnionType,
)


# ============================================================
# 词法
# ============================================================

TOKEN_PATTERN = re.compile(
    r"""
    (?P<space>\s+)
  | (?P<arrow>→|->)
  | (?P<ellipsis>\.\.\.)
  | (?P<string>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')
  | (?P<number>-?\d+(?:\.\d+)?)
  | (?P<name>[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*)
  | (?P<punct>[?()\[\]{}<>,:|])
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class Token:
    kind: str
    value: str
    position: int


def tokenize(text: str) -> list[Token]:
    """将类型签名切分为词法单元（忽略空白）"""
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        match = TOKEN_PATTERN.match(text, pos)
        if not match:
            raise TypeSpecSyntaxError(f"Unexpected character {text[pos]!r}", text, pos)
        kind = match.lastgroup
        if kind != "space":
            value = match.group()
            tokens.append(Token(kind="punct" if kind == "arrow" else kind, value=value, position=pos))
        pos = match.end()
    return tokens


# ============================================================
# 语法
# ============================================================

class TypeSpecParser:
    """递归下降的类型签名解析器"""

    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.pos = 0

    def parse(self) -> TypeNode:
        node = self._parse_type()
        if self._peek() is not None:
            self._fail(f"Unexpected {self._peek().value!r}")
        return node

    # --- 游标 ---

    def _peek(self, offset: int = 0) -> Optional[Token]:
        index = self.pos + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def _at(self, *values: str, offset: int = 0) -> bool:
        token = self._peek(offset)
        return token is not None and token.kind in ("punct", "ellipsis") and token.value in values

    def _advance(self) -> Token:
        token = self._peek()
        if token is None:
            self._fail("Unexpected end of type")
        self.pos += 1
        return token

    def _expect(self, *values: str) -> Token:
        if not self._at(*values):
            found = self._peek()
            self._fail(f"Expected {' or '.join(repr(v) for v in values)}, found "
                       f"{repr(found.value) if found else 'end of type'}")
        return self._advance()

    def _fail(self, message: str) -> None:
        token = self._peek()
        position = token.position if token else len(self.text)
        raise TypeSpecSyntaxError(message, self.text, position)

    # --- 产生式 ---

    def _parse_type(self) -> TypeNode:
        types = [self._parse_single()]
        while self._at("|"):
            self._advance()
            types.append(self._parse_single())
        return types[0] if len(types) == 1 else UnionType(types=types)

    def _parse_single(self) -> TypeNode:
        token = self._peek()
        if token is None:
            self._fail("Unexpected end of type")

        if self._at("?"):
            self._advance()
            return NullableType(type=self._parse_single())

        if self._at("["):
            self._advance()
            element = self._parse_type()
            self._expect("]")
            return ArrayType(type=element)

        if self._at("{"):
            return self._parse_object()

        if self._at("("):
            return self._parse_function()

        if token.kind == "string":
            self._advance()
            return LiteralType(value=token.value[1:-1])

        if token.kind == "number":
            self._advance()
            value = float(token.value) if "." in token.value else int(token.value)
            return LiteralType(value=value)

        if token.kind == "name":
            self._advance()
            node = NameType(name=token.value)
            if self._at("<"):
                self._advance()
                arguments = [self._parse_type()]
                while self._at(","):
                    self._advance()
                    arguments.append(self._parse_type())
                self._expect(">")
                node.type_arguments = arguments
            return node

        self._fail(f"Unexpected {token.value!r}")

    def _parse_object(self) -> ObjectType:
        self._expect("{")
        members: list[ObjectField] = []
        while not self._at("}"):
            name = self._advance()
            if name.kind != "name":
                self.pos -= 1
                self._fail(f"Expected field name, found {name.value!r}")
            optional = False
            if self._at("?"):
                self._advance()
                optional = True
            self._expect(":")
            members.append(ObjectField(name=name.value, type=self._parse_type(), optional=optional))
            if not self._at("}"):
                self._expect(",")
        self._expect("}")
        return ObjectType(fields=members)

    def _parse_function(self) -> FunctionType:
        self._expect("(")
        parameters: list[FunctionParameter] = []
        while not self._at(")"):
            parameters.append(self._parse_parameter())
            if not self._at(")"):
                self._expect(",")
        self._expect(")")

        function = FunctionType(parameters=parameters)
        if self._at("→", "->"):
            self._advance()
            function.return_type = self._parse_type()
        return function

    def _parse_parameter(self) -> FunctionParameter:
        rest = False
        if self._at("..."):
            self._advance()
            rest = True

        # "name:" 或 "name?:" 开头的是具名参数，否则整体是类型
        name = None
        optional = False
        token = self._peek()
        if token is not None and token.kind == "name":
            if self._at(":", offset=1):
                name = self._advance().value
                self._advance()
            elif self._at("?", offset=1) and self._at(":", offset=2):
                name = self._advance().value
                self._advance()
                self._advance()
                optional = True

        return FunctionParameter(type=self._parse_type(), name=name, optional=optional, rest=rest)


def parse_type(text: str) -> TypeNode:
    """
    解析类型签名

    Args:
        text: 类型签名文本

    Returns:
        类型节点树

    Raises:
        TypeSpecSyntaxError: 签名格式错误
    """
    return TypeSpecParser(text).parse()
