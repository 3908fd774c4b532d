"""
声明数据模型

Declaration 是提取结果中唯一的持久实体，交给文档渲染器使用。
"""

import json
from dataclasses import dataclass
from typing import Optional

from getdocs_extractor.typespec.nodes import TypeNode


@dataclass
class Declaration:
    """
    从注释中提取的声明

    Attributes:
        name: 声明名称
        type: 结构化类型
        type_spec: 注释中书写的原始类型签名，隐式类型时为 None
        properties: 嵌套声明（源码顺序），没有子声明时为 None
    """
    name: str
    type: TypeNode
    type_spec: Optional[str] = None
    properties: Optional[list["Declaration"]] = None

    def add_property(self, declaration: "Declaration") -> None:
        """追加子声明，首次追加时创建列表"""
        if self.properties is None:
            self.properties = []
        self.properties.append(declaration)

    def to_dict(self) -> dict:
        """序列化为字典，省略空字段"""
        data = {"name": self.name}
        if self.type_spec is not None:
            data["typeSpec"] = self.type_spec
        data["type"] = self.type.to_dict()
        if self.properties:
            data["properties"] = [prop.to_dict() for prop in self.properties]
        return data


def declarations_to_json(declarations: list[Declaration]) -> str:
    """序列化为 JSON 字符串"""
    return json.dumps([d.to_dict() for d in declarations], ensure_ascii=False, indent=2)
