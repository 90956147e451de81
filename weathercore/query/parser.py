"""
查询解析器模块 - 按文本截取解析 SELECT / INSERT 语句

解析器不做词法分析，也不校验取值：操作数直接从语句文本中截取，
WHERE 之后的全部内容都当作一个等值条件处理，等号右侧剩余的文本
（包括分号和后续语句）原样作为比较值，永远不会被当作第二条语句执行。
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Tuple

from loguru import logger

from ..core.config import QueryConfig
from ..core.exceptions import MalformedStatementError, UnsupportedStatementError

SELECT = "SELECT"
INSERT = "INSERT"

QUOTE_CHARS = "'\""

INT_PATTERN = re.compile(r'^[+-]?\d+$')
FLOAT_PATTERN = re.compile(r'^[+-]?(\d+\.\d*|\.\d+)([eE][+-]?\d+)?$')


def _split_on_keyword(text: str, keyword: str) -> List[str]:
    """在第一个完整关键字处切分（不区分大小写）"""
    return re.split(rf'\b{keyword}\b', text, maxsplit=1, flags=re.IGNORECASE)


@dataclass
class ParsedStatement:
    """解析后的语句"""
    kind: str
    table: str
    select_fields: List[str] = field(default_factory=lambda: ['*'])
    where_column: Optional[str] = None
    where_value: Optional[str] = None
    columns: List[str] = field(default_factory=list)
    values: List[Any] = field(default_factory=list)

    @property
    def has_filter(self) -> bool:
        return self.where_column is not None

    def insert_values(self) -> Dict[str, Any]:
        """按位置把列和值配对"""
        return dict(zip(self.columns, self.values))


class QueryParser:
    """
    查询解析器 - 将语句文本转换为 ParsedStatement
    """

    def __init__(self, config: QueryConfig):
        """
        初始化查询解析器

        Args:
            config: 查询配置
        """
        self.config = config

        logger.info(f"查询解析器初始化完成，模式: {config.parser_mode}")

    def parse(self, statement: str) -> ParsedStatement:
        """
        解析语句

        Args:
            statement: 语句文本

        Returns:
            解析后的语句对象
        """
        text = (statement or '').strip()
        words = text.split(None, 1)
        keyword = words[0].upper() if words else ''

        if keyword == SELECT:
            return self._parse_select(text)
        elif keyword == INSERT:
            return self._parse_insert(text)
        elif not keyword:
            raise UnsupportedStatementError("语句为空")
        else:
            raise UnsupportedStatementError(f"不支持的语句类型: {keyword}")

    def _parse_select(self, text: str) -> ParsedStatement:
        """解析 SELECT 语句"""
        parts = _split_on_keyword(text, 'FROM')
        if len(parts) < 2:
            raise MalformedStatementError("SELECT 语句缺少 FROM")

        head, tail = parts
        tail_words = tail.split()
        if not tail_words:
            raise MalformedStatementError("FROM 之后缺少表名")

        parsed = ParsedStatement(
            kind=SELECT,
            table=tail_words[0],
            select_fields=self._extract_select_fields(head)
        )

        where_parts = _split_on_keyword(text, 'WHERE')
        if len(where_parts) == 2:
            parsed.where_column, parsed.where_value = self._extract_where_condition(where_parts[1])

        return parsed

    def _extract_select_fields(self, head: str) -> List[str]:
        """提取 SELECT 字段"""
        words = head.strip().split(None, 1)
        fields_str = words[1] if len(words) > 1 else ''
        fields = [f.strip() for f in fields_str.split(',')]

        if not all(fields):
            raise MalformedStatementError("SELECT 字段列表为空或不完整")
        return fields

    def _extract_where_condition(self, filter_text: str) -> Tuple[str, str]:
        """
        提取 WHERE 等值条件

        在第一个 '=' 处切分，左侧为列名，右侧去掉首尾引号后为比较值。
        右侧不再继续解析，AND/OR、分号和后续语句都留在值里。
        """
        filter_text = filter_text.strip()
        if '=' not in filter_text:
            raise MalformedStatementError("WHERE 条件缺少 '='")

        column, value = filter_text.split('=', 1)
        column = column.strip()
        if not column:
            raise MalformedStatementError("WHERE 条件缺少列名")

        return column, self._clean_filter_value(value)

    def _clean_filter_value(self, raw_value: str) -> str:
        """去掉过滤值两端的空白和引号"""
        return raw_value.strip().strip(QUOTE_CHARS)

    def _parse_insert(self, text: str) -> ParsedStatement:
        """解析 INSERT 语句"""
        into_match = re.search(r'\bINTO\s+([^\s(]+)', text, re.IGNORECASE)
        if not into_match:
            raise MalformedStatementError("INSERT 语句缺少 INTO 表名")

        table = into_match.group(1)
        after_table = text[into_match.end():]

        parts = _split_on_keyword(after_table, 'VALUES')
        if len(parts) < 2:
            raise MalformedStatementError("INSERT 语句缺少 VALUES")
        column_part, value_part = parts

        open_pos = column_part.find('(')
        close_pos = column_part.find(')', open_pos + 1)
        if open_pos == -1 or close_pos == -1:
            raise MalformedStatementError("INSERT 语句缺少列列表")
        columns = [c.strip() for c in column_part[open_pos + 1:close_pos].split(',')]

        open_pos = value_part.find('(')
        close_pos = value_part.rfind(')')
        if open_pos == -1 or close_pos <= open_pos:
            raise MalformedStatementError("INSERT 语句缺少值列表")
        raw_values = [v.strip() for v in value_part[open_pos + 1:close_pos].split(',')]

        if not all(columns):
            raise MalformedStatementError("INSERT 列列表为空或不完整")
        if len(set(columns)) != len(columns):
            raise MalformedStatementError("INSERT 列列表包含重复列")
        if len(columns) != len(raw_values):
            raise MalformedStatementError(
                f"INSERT 列数 ({len(columns)}) 与值数 ({len(raw_values)}) 不一致"
            )

        return ParsedStatement(
            kind=INSERT,
            table=table,
            columns=columns,
            values=[self._convert_literal(v) for v in raw_values]
        )

    def _convert_literal(self, raw: str) -> Any:
        """把值文本转换为标量"""
        if len(raw) >= 2 and raw[0] in QUOTE_CHARS and raw[-1] == raw[0]:
            return raw[1:-1]

        lowered = raw.lower()
        if lowered == 'null':
            return None
        if lowered in ('true', 'false'):
            return lowered == 'true'
        if INT_PATTERN.match(raw):
            return int(raw)
        if FLOAT_PATTERN.match(raw):
            return float(raw)

        # 未加引号的单词按文本处理
        return raw


class StrictQueryParser(QueryParser):
    """
    严格模式解析器

    语法与 QueryParser 相同，但拒绝带有语句终止符或残留引号的过滤值。
    """

    def _clean_filter_value(self, raw_value: str) -> str:
        value = super()._clean_filter_value(raw_value)
        if ';' in value or any(quote in value for quote in QUOTE_CHARS):
            raise MalformedStatementError("WHERE 过滤值包含非法字符")
        return value


def create_query_parser(config: QueryConfig) -> QueryParser:
    """根据配置创建解析器"""
    if config.parser_mode == 'strict':
        return StrictQueryParser(config)
    return QueryParser(config)
