"""
JavaScript 源码结构解析

使用 esprima 解析 JavaScript 代码，提供：
- 程序元素数组（arena），记录名称/类型推导需要的结构信息
- 祖先链查询
- 注释附着：采用 esprima attachComment 给出的 leadingComments /
  trailingComments / innerComments，连续附着到同一位置的注释组成一个注释组 (CommentRun)
"""

import logging
from typing import Iterator, Optional

import esprima
from esprima.error_handler import Error as EsprimaError

from getdocs_extractor.errors import SourceSyntaxError
from getdocs_extractor.source.models import (
    CommentRun,
    ElementKind,
    ParseConfig,
    Placement,
    SourceComment,
    SourceElement,
    SourceParameter,
)

logger = logging.getLogger(__name__)


# 遍历时跳过的非子节点字段
SKIPPED_KEYS = frozenset({"loc", "range", "comments", "leadingComments", "trailingComments", "innerComments"})

# esprima 附着注释的字段及对应位置，靠前的优先
ATTACHMENT_KEYS = (
    ("leadingComments", Placement.LEADING),
    ("trailingComments", Placement.TRAILING),
    ("innerComments", Placement.DANGLING),
)

# export 语句包裹的声明会代替 export 语句接收注释
EXPORT_TYPES = frozenset({"ExportNamedDeclaration", "ExportDefaultDeclaration"})
UNWRAPPED_DECLARATION_TYPES = frozenset({"ClassDeclaration", "FunctionDeclaration", "VariableDeclaration"})

# /** */ 风格的 JSDoc 注释不属于 getdocs 语法
JSDOC_MARKER = "*"


class SourceTree:
    """
    一次解析得到的源码结构

    Attributes:
        elements: 程序元素（下标 0 为 Program）
        comments: 参与提取的注释（源码顺序）
    """

    def __init__(self, elements: list[SourceElement], comments: list[SourceComment]):
        self.elements = elements
        self.comments = comments

    @property
    def program(self) -> SourceElement:
        return self.elements[0]

    def element(self, index: int) -> SourceElement:
        return self.elements[index]

    def ancestors(self, index: int) -> Iterator[SourceElement]:
        """由近及远遍历祖先元素（不含自身）"""
        parent = self.elements[index].parent
        while parent is not None:
            element = self.elements[parent]
            yield element
            parent = element.parent

    def closest(self, index: int, node_type: str) -> Optional[SourceElement]:
        """查找最近的指定类型元素（含自身）"""
        element = self.elements[index]
        if element.node_type == node_type:
            return element
        for ancestor in self.ancestors(index):
            if ancestor.node_type == node_type:
                return ancestor
        return None

    def enclosing_class(self, index: int) -> Optional[SourceElement]:
        """查找包围该元素的类声明"""
        for ancestor in self.ancestors(index):
            if ancestor.kind is ElementKind.CLASS:
                return ancestor
        return None

    def comment_runs(self) -> list[CommentRun]:
        """按源码顺序返回注释组"""
        runs: list[CommentRun] = []
        for comment in self.comments:
            last = runs[-1] if runs else None
            if last is None or last.element != comment.element or last.placement is not comment.placement:
                last = CommentRun(element=comment.element, placement=comment.placement)
                runs.append(last)
            last.comments.append(comment)
        return runs


class SourceTreeBuilder:
    """将 esprima 的字典形式 AST 转换为 SourceTree"""

    def __init__(self):
        self.elements: list[SourceElement] = []
        # 注释起始偏移 -> [(元素下标, 位置)]
        self.attachments: dict[int, list[tuple[int, Placement]]] = {}

    def build(self, program: dict) -> SourceTree:
        self._add(program, parent=None)
        comments = []
        for raw in program.get("comments") or []:
            comment = self._comment(raw)
            if comment.block and comment.value.startswith(JSDOC_MARKER):
                logger.debug(f"Skipping JSDoc comment at line {comment.start_line}")
                continue
            self._attach(comment)
            comments.append(comment)
        comments.sort(key=lambda c: c.start)
        return SourceTree(self.elements, comments)

    # --- 元素 ---

    def _add(self, node: dict, parent: Optional[int]) -> int:
        index = len(self.elements)
        start, end = node.get("range") or (0, 0)
        loc = node.get("loc") or {}
        element = SourceElement(
            index=index,
            node_type=node["type"],
            kind=ElementKind.OTHER,
            start=start,
            end=end,
            start_line=loc.get("start", {}).get("line", 1),
            end_line=loc.get("end", {}).get("line", 1),
            parent=parent,
        )
        self.elements.append(element)
        self._describe(element, node)
        for key, placement in ATTACHMENT_KEYS:
            for raw in node.get(key) or []:
                comment_start = (raw.get("range") or (0, 0))[0]
                self.attachments.setdefault(comment_start, []).append((index, placement))

        wrapped = node.get("declaration") if node["type"] in EXPORT_TYPES else None
        for child in _child_nodes(node):
            child_index = self._add(child, parent=index)
            element.children.append(child_index)
            if child is wrapped and child.get("type") in UNWRAPPED_DECLARATION_TYPES:
                element.declaration = child_index
        return index

    def _describe(self, element: SourceElement, node: dict) -> None:
        """填充元素种类及推导所需字段"""
        node_type = node["type"]
        if node_type == "Program":
            element.kind = ElementKind.PROGRAM
        elif node_type == "ClassDeclaration":
            element.kind = ElementKind.CLASS
            element.name = _identifier_name(node.get("id"))
        elif node_type == "FunctionDeclaration":
            element.kind = ElementKind.FUNCTION
            element.name = _identifier_name(node.get("id"))
            element.params = [_parameter(p) for p in node.get("params") or []]
        elif node_type == "MethodDefinition":
            element.kind = ElementKind.METHOD
            element.name = _key_name(node.get("key"))
            function = node.get("value") or {}
            element.params = [_parameter(p) for p in function.get("params") or []]
        elif node_type == "VariableDeclaration":
            element.kind = ElementKind.VARIABLE
            element.declarators = [_identifier_name(d.get("id")) for d in node.get("declarations") or []]
        elif node_type == "ExpressionStatement":
            field_name = _this_assignment_field(node.get("expression"))
            if field_name:
                element.kind = ElementKind.ASSIGNMENT
                element.name = field_name

    # --- 注释 ---

    def _comment(self, raw: dict) -> SourceComment:
        start, end = raw.get("range") or (0, 0)
        loc = raw.get("loc") or {}
        return SourceComment(
            block=raw.get("type") in ("Block", "BlockComment"),
            value=raw.get("value", ""),
            start=start,
            end=end,
            start_line=loc.get("start", {}).get("line", 1),
            end_line=loc.get("end", {}).get("line", 1),
        )

    def _attach(self, comment: SourceComment) -> None:
        """
        根据 esprima 的附着结果确定注释所属元素

        esprima 会把两条语句之间的注释同时记为前一条的尾随注释和后一条的
        前导注释，取舍顺序为：
        1. 与前一元素同行结束的尾随注释
        2. 前导注释
        3. 其余尾随注释、空块中的注释
        4. 未被附着（例如空类体中的注释）时悬挂在包含它的最内层元素上
        """
        attached = {placement: index for index, placement in self.attachments.get(comment.start, [])}
        trailing = attached.get(Placement.TRAILING)

        if trailing is not None and self.elements[trailing].end_line == comment.start_line:
            target, placement = self.elements[trailing], Placement.TRAILING
        else:
            placement = next((p for _key, p in ATTACHMENT_KEYS if p in attached), None)
            if placement is not None:
                target = self.elements[attached[placement]]
            else:
                target, placement = self._innermost(comment), Placement.DANGLING

        if target.declaration is not None:
            target = self.elements[target.declaration]
        comment.element = target.index
        comment.placement = placement

    def _innermost(self, comment: SourceComment) -> SourceElement:
        # 先序下标越大的包含元素越靠内
        enclosing = [e for e in self.elements if e.start <= comment.start and comment.end <= e.end]
        return enclosing[-1] if enclosing else self.elements[0]


def _child_nodes(node: dict) -> list[dict]:
    """按源码顺序返回子节点"""
    children = []
    for key, value in node.items():
        if key in SKIPPED_KEYS:
            continue
        if isinstance(value, dict) and "type" in value:
            children.append(value)
        elif isinstance(value, list):
            children.extend(item for item in value if isinstance(item, dict) and "type" in item)
    children.sort(key=lambda child: (child.get("range") or (0, 0))[0])
    return children


def _identifier_name(node: Optional[dict]) -> Optional[str]:
    if node and node.get("type") == "Identifier":
        return node.get("name")
    return None


def _key_name(node: Optional[dict]) -> Optional[str]:
    if not node:
        return None
    if node.get("type") == "Identifier":
        return node.get("name")
    if node.get("type") == "Literal" and isinstance(node.get("value"), str):
        return node["value"]
    return None


def _parameter(node: dict) -> SourceParameter:
    node_type = node.get("type", "")
    if node_type == "Identifier":  # foo(bar) {}
        return SourceParameter(node_type=node_type, name=node.get("name"))
    if node_type == "AssignmentPattern":  # foo(bar = 1) {}
        return SourceParameter(node_type=node_type, name=_identifier_name(node.get("left")))
    return SourceParameter(node_type=node_type)


def _this_assignment_field(expression: Optional[dict]) -> Optional[str]:
    """this.<field> = ... 形式的赋值返回字段名"""
    if not expression or expression.get("type") != "AssignmentExpression":
        return None
    target = expression.get("left") or {}
    if target.get("type") != "MemberExpression" or target.get("computed"):
        return None
    if (target.get("object") or {}).get("type") != "ThisExpression":
        return None
    return _identifier_name(target.get("property"))


def parse_source(source: str, config: Optional[ParseConfig] = None) -> SourceTree:
    """
    解析 JavaScript 源码

    Args:
        source: 源码文本
        config: 解析配置

    Returns:
        SourceTree 对象

    Raises:
        SourceSyntaxError: 源码语法错误
    """
    config = config or ParseConfig()
    options = {
        "comment": True,
        "attachComment": True,
        "loc": True,
        "range": True,
        "tolerant": config.tolerant,
    }
    parse = esprima.parseModule if config.source_type == "module" else esprima.parseScript
    try:
        program = parse(source, options).toDict()
    except EsprimaError as e:
        raise SourceSyntaxError(f"Unable to parse source: {e}") from e

    tree = SourceTreeBuilder().build(program)
    logger.debug(f"Parsed {len(tree.elements)} elements, {len(tree.comments)} comments")
    return tree
