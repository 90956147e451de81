"""
表存储模块 - 内存中的命名表集合
"""

import threading
from dataclasses import dataclass, field
from typing import Dict, List, Any

from loguru import logger

from ..core.exceptions import DuplicateTableError, UnknownTableError, SchemaMismatchError

ID_COLUMN = "id"


@dataclass
class Table:
    """单张表：列定义、按插入顺序排列的行以及自增 ID"""
    name: str
    columns: List[str]
    rows: List[Dict[str, Any]] = field(default_factory=list)
    next_id: int = 1
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class TableStore:
    """
    表存储引擎 - 提供表的创建、扫描和追加

    不理解任何语句语法，只负责保存数据。每张表有独立的锁，
    追加行和读取行互斥，读取方不会看到写了一半的行。
    """

    def __init__(self):
        """初始化表存储"""
        self.tables: Dict[str, Table] = {}

        logger.info("表存储初始化完成")

    def create_table(self, name: str, columns: List[str]) -> Table:
        """
        创建表，仅在初始化阶段调用

        Args:
            name: 表名
            columns: 列名列表，不含 id（id 总是第一列）

        Returns:
            新建的表
        """
        if name in self.tables:
            logger.critical(f"重复创建表: {name}")
            raise DuplicateTableError(f"表已存在: {name}")

        schema = [ID_COLUMN] + [column for column in columns if column != ID_COLUMN]
        table = Table(name=name, columns=schema)
        self.tables[name] = table

        logger.info(f"创建表 {name}，列: {schema}")
        return table

    def has_table(self, name: str) -> bool:
        """判断表是否存在"""
        return name in self.tables

    def table_names(self) -> List[str]:
        """获取所有表名"""
        return list(self.tables.keys())

    def columns(self, name: str) -> List[str]:
        """获取表的列定义"""
        return list(self._get_table(name).columns)

    def all_rows(self, name: str) -> List[Dict[str, Any]]:
        """
        获取表中全部行

        Args:
            name: 表名

        Returns:
            按插入顺序排列的行副本
        """
        table = self._get_table(name)
        with table.lock:
            return [dict(row) for row in table.rows]

    def append_row(self, name: str, values: Dict[str, Any]) -> Dict[str, Any]:
        """
        追加一行

        Args:
            name: 表名
            values: 列名到值的映射，不能包含 id

        Returns:
            新插入的行（含分配的 id）
        """
        table = self._get_table(name)

        for column in values:
            if column == ID_COLUMN or column not in table.columns:
                raise SchemaMismatchError(name, column)

        with table.lock:
            row = {column: values.get(column) for column in table.columns}
            row[ID_COLUMN] = table.next_id
            table.next_id += 1
            table.rows.append(row)

        return dict(row)

    def row_count(self, name: str) -> int:
        """获取表的行数"""
        table = self._get_table(name)
        with table.lock:
            return len(table.rows)

    def get_statistics(self) -> Dict[str, Any]:
        """获取存储统计信息"""
        tables = {name: self.row_count(name) for name in self.tables}
        return {
            "total_tables": len(tables),
            "total_rows": sum(tables.values()),
            "tables": tables
        }

    def _get_table(self, name: str) -> Table:
        """按名称取表"""
        table = self.tables.get(name)
        if table is None:
            raise UnknownTableError(name)
        return table
