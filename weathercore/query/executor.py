"""
查询执行器模块 - 在表存储上执行语句
"""

from typing import Dict, List, Any, Optional

from loguru import logger

from ..storage.table_store import TableStore
from ..core.config import QueryConfig
from ..core.exceptions import UnsupportedStatementError
from .parser import QueryParser, ParsedStatement, SELECT, INSERT


def _as_text(value: Any) -> Optional[str]:
    """把列值转换为比较用的文本"""
    if value is None:
        return None
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class QueryExecutor:
    """
    查询执行器 - 解析语句并在表存储上执行

    SELECT 只读，INSERT 追加一行。执行器不记录语句文本，也不做参数绑定。
    """

    def __init__(self,
                 table_store: TableStore,
                 query_parser: QueryParser,
                 query_config: QueryConfig):
        """
        初始化查询执行器

        Args:
            table_store: 表存储
            query_parser: 语句解析器，任何提供 parse(statement) 的对象都可以
            query_config: 查询配置
        """
        self.table_store = table_store
        self.query_parser = query_parser
        self.config = query_config

        logger.info("查询执行器初始化完成")

    async def execute(self, statement: str) -> List[Dict[str, Any]]:
        """
        执行语句

        Args:
            statement: 语句文本

        Returns:
            结果行列表
        """
        parsed_query = self.query_parser.parse(statement)

        if parsed_query.kind == SELECT:
            return await self._execute_select(parsed_query)
        elif parsed_query.kind == INSERT:
            return await self._execute_insert(parsed_query)
        raise UnsupportedStatementError(f"不支持的语句类型: {parsed_query.kind}")

    async def _execute_select(self, parsed_query: ParsedStatement) -> List[Dict[str, Any]]:
        """执行 SELECT"""
        rows = self.table_store.all_rows(parsed_query.table)

        if parsed_query.has_filter:
            rows = self._apply_where_condition(rows, parsed_query)

        return self._select_fields(rows, parsed_query)

    def _apply_where_condition(self, rows: List[Dict[str, Any]], parsed_query: ParsedStatement) -> List[Dict[str, Any]]:
        """按文本等值过滤"""
        column = parsed_query.where_column
        value = parsed_query.where_value

        return [row for row in rows if _as_text(row.get(column)) == value]

    def _select_fields(self, rows: List[Dict[str, Any]], parsed_query: ParsedStatement) -> List[Dict[str, Any]]:
        """选择字段"""
        select_fields = parsed_query.select_fields
        if '*' in select_fields:
            return rows

        return [{field: row.get(field) for field in select_fields} for row in rows]

    async def _execute_insert(self, parsed_query: ParsedStatement) -> List[Dict[str, Any]]:
        """执行 INSERT，返回只含新行的列表"""
        row = self.table_store.append_row(parsed_query.table, parsed_query.insert_values())
        return [row]
