"""
JSON 报告器 - 输出 JSON 格式的声明树
"""

import json
import sys
from typing import TextIO

from getdocs_extractor.reporters.base import FileDeclarations


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, results: list[FileDeclarations]) -> None:
        """生成 JSON 格式报告"""
        report_data = {
            "files": [
                {
                    "path": result.path,
                    "declarations": [d.to_dict() for d in result.declarations],
                }
                for result in results
            ],
            "summary": {
                "files": len(results),
                "declarations": sum(len(r.declarations) for r in results),
            },
        }

        json_str = json.dumps(report_data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
