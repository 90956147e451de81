"""
WeatherCoreDB 主数据库类
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Any, Optional

from loguru import logger

from .config import Config
from .exceptions import QueryError
from .schema import init_store
from ..storage.table_store import TableStore
from ..query.parser import create_query_parser
from ..query.executor import QueryExecutor


class WeatherCoreDB:
    """
    内存天气数据库主类

    每个实例拥有自己的 TableStore，构造时写入固定表结构和种子数据。
    """

    def __init__(self, config: Optional[Config] = None):
        """
        初始化数据库

        Args:
            config: 配置对象，如果为 None 则使用默认配置
        """
        self.config = config or Config()
        self.db_id = str(uuid.uuid4())
        self.created_at = datetime.now(timezone.utc).isoformat()
        self.statement_count = 0

        # 初始化核心组件
        self._init_components()

        # 写入表结构和种子数据
        self.init_store()

        logger.info(f"WeatherCoreDB 初始化完成，数据库 ID: {self.db_id}")

    def _init_components(self):
        """初始化核心组件"""
        self.table_store = TableStore()
        self.query_parser = create_query_parser(self.config.query)
        self.query_executor = QueryExecutor(
            self.table_store,
            self.query_parser,
            self.config.query
        )

        logger.info("核心组件初始化完成")

    def init_store(self):
        """创建表结构并写入种子数据，重复调用会抛出 DuplicateTableError"""
        init_store(self.table_store, self.config.storage)

    async def execute(self, statement: str) -> List[Dict[str, Any]]:
        """
        执行语句

        Args:
            statement: SELECT 或 INSERT 语句文本

        Returns:
            结果行列表；INSERT 返回只含新行的列表
        """
        try:
            results = await self.query_executor.execute(statement)
            self.statement_count += 1

            logger.info(f"语句执行完成，返回 {len(results)} 条结果")
            return results

        except QueryError as e:
            logger.error(f"语句执行失败: {e}")
            raise

    async def get_statistics(self) -> Dict[str, Any]:
        """
        获取数据库统计信息

        Returns:
            统计信息字典
        """
        stats = {
            "db_id": self.db_id,
            "parser_mode": self.config.query.parser_mode,
            "statements_executed": self.statement_count,
            "storage_stats": self.table_store.get_statistics(),
            "created_at": self.created_at
        }

        return stats

    async def close(self):
        """关闭数据库，内存数据随对象一起释放"""
        logger.info("数据库已关闭")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
