"""
错误类型定义

提取过程中的所有错误都是致命的：任何一个错误都会中止整个 extract 调用，
不返回部分结果。错误消息携带出错的原始文本，调用方应原样展示。
"""


class ExtractError(Exception):
    """提取错误基类"""
    pass


class SourceSyntaxError(ExtractError):
    """JavaScript 源码无法解析"""
    pass


class UnknownLineSyntaxError(ExtractError):
    """注释行不匹配任何已知语法"""
    pass


class CommentSpecError(ExtractError):
    """注释中的类型签名前缀格式错误"""
    pass


class UnresolvableNameError(ExtractError):
    """无法确定声明名称"""
    pass


class UnresolvableTypeError(ExtractError):
    """无法确定声明类型"""
    pass


class MalformedNestingError(ExtractError):
    """属性列表的缩进结构错误"""
    pass


class UnsupportedParameterError(ExtractError):
    """方法参数形式不支持（解构、剩余参数等）"""
    pass


class TypeSpecSyntaxError(ExtractError):
    """
    类型签名语法错误

    Attributes:
        text: 出错的类型签名
        position: 出错位置（0-based 字符偏移）
    """

    def __init__(self, message: str, text: str, position: int):
        super().__init__(f"{message} at {position} in type '{text}'")
        self.text = text
        self.position = position
