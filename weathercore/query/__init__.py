"""
查询层模块 - 语句解析和执行
"""

from .parser import QueryParser, StrictQueryParser
from .executor import QueryExecutor

__all__ = ["QueryParser", "StrictQueryParser", "QueryExecutor"]
