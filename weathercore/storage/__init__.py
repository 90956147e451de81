"""
存储层模块 - 内存表存储
"""

from .table_store import TableStore, Table

__all__ = ["TableStore", "Table"]
