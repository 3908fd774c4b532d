"""
声明关联

维护 (程序元素, 声明) 关联表，决定每个块头声明是顶层声明，
还是某个已有声明的属性。关联表只追加不修改，按元素下标查找。
"""

import logging
from typing import Optional

from getdocs_extractor.core.resolver import resolve_name, resolve_type
from getdocs_extractor.models import Declaration
from getdocs_extractor.source.js_ast import SourceTree
from getdocs_extractor.source.models import ElementKind, SourceElement
from getdocs_extractor.typespec import ClassType, FunctionType

logger = logging.getLogger(__name__)

CONSTRUCTOR_NAME = "constructor"


class DeclarationLinker:
    """
    声明关联器

    Attributes:
        tree: 源码结构
        declarations: 顶层声明（结果）
        links: (元素下标, 声明) 关联表
    """

    def __init__(self, tree: SourceTree):
        self.tree = tree
        self.declarations: list[Declaration] = []
        self.links: list[tuple[int, Declaration]] = []

    def link(self, declaration: Declaration, element_index: int) -> None:
        """
        将块头声明挂到父声明下或作为顶层声明，并登记关联

        Args:
            declaration: 已解析的声明
            element_index: 注释块关联的元素下标
        """
        element = self.tree.element(element_index)
        parent = self.find_parent(element_index)
        if parent is None:
            parent = self._implicit_class_declaration(element_index)

        owner = declaration
        if parent is None:
            self.declarations.append(declaration)
        elif _is_constructor_of(declaration, element, parent):
            parent.type.constructor_parameters = declaration.type.parameters
            # 构造方法体内的声明归属于类
            owner = parent
        else:
            parent.add_property(declaration)

        if element.kind is not ElementKind.PROGRAM:
            self.register(element_index, owner)

    def register(self, element_index: int, declaration: Declaration) -> None:
        self.links.append((element_index, declaration))

    def owner(self, element_index: int) -> Optional[Declaration]:
        """返回元素最近登记的声明"""
        for index, declaration in reversed(self.links):
            if index == element_index:
                return declaration
        return None

    def find_parent(self, element_index: int) -> Optional[Declaration]:
        """
        沿祖先链由近及远查找已拥有声明的元素

        this.<field> 赋值声明的是类的字段，跳过所在方法的声明。
        """
        skip_methods = self.tree.element(element_index).kind is ElementKind.ASSIGNMENT
        for ancestor in self.tree.ancestors(element_index):
            if skip_methods and ancestor.kind is ElementKind.METHOD:
                continue
            declaration = self.owner(ancestor.index)
            if declaration is not None:
                return declaration
        return None

    def _implicit_class_declaration(self, element_index: int) -> Optional[Declaration]:
        """为没有注释的外层类合成声明，使其方法和属性有所归属"""
        class_element = self.tree.enclosing_class(element_index)
        if class_element is None:
            return None

        declaration = Declaration(
            name=resolve_name(None, class_element),
            type=resolve_type("", class_element),
        )
        logger.debug(f"Synthesized declaration for undocumented class '{declaration.name}'")
        self.declarations.append(declaration)
        self.register(class_element.index, declaration)
        return declaration


def _is_constructor_of(declaration: Declaration, element: SourceElement, parent: Declaration) -> bool:
    return (
        element.kind is ElementKind.METHOD
        and element.name == CONSTRUCTOR_NAME
        and declaration.name == CONSTRUCTOR_NAME
        and isinstance(declaration.type, FunctionType)
        and isinstance(parent.type, ClassType)
    )
