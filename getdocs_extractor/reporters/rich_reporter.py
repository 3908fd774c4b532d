"""
Rich 终端报告器 - 以树形结构输出提取到的声明
"""

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from getdocs_extractor.models import Declaration
from getdocs_extractor.reporters.base import FileDeclarations
from getdocs_extractor.typespec import ClassType


# 按类型种类着色
KIND_STYLES = {
    "Class": "bold magenta",
    "Interface": "bold cyan",
    "Function": "green",
    "Any": "dim",
}


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, results: list[FileDeclarations]) -> None:
        """生成 Rich 格式报告"""
        total = 0
        for result in results:
            tree = Tree(Text(result.path, style="bold"))
            for declaration in result.declarations:
                self._add_declaration(tree, declaration)
            if not result.declarations:
                tree.add(Text("no declarations", style="dim"))
            self.console.print(tree)
            total += len(result.declarations)

        self.console.print()
        self.console.print(f"[dim]{total} top-level declaration(s) in {len(results)} file(s)[/dim]")

    def _add_declaration(self, parent: Tree, declaration: Declaration) -> None:
        branch = parent.add(self._label(declaration))
        for prop in declaration.properties or []:
            self._add_declaration(branch, prop)

    def _label(self, declaration: Declaration) -> Text:
        kind = declaration.type.kind
        label = Text(declaration.name, style=KIND_STYLES.get(kind, "yellow"))
        if declaration.type_spec:
            label.append(f" :: {declaration.type_spec}", style="white")
        else:
            label.append(f" ({kind})", style="dim")

        if isinstance(declaration.type, ClassType) and declaration.type.constructor_parameters:
            names = ", ".join(p.name or "?" for p in declaration.type.constructor_parameters)
            label.append(f" constructor({names})", style="dim")
        return label
