"""
异常模块 - WeatherCoreDB 的异常层次
"""


class WeatherCoreError(Exception):
    """所有 WeatherCoreDB 异常的基类"""


class ConfigError(WeatherCoreError):
    """配置无效或无法读取"""


class ConfigNotFoundError(ConfigError):
    """配置文件不存在"""


class DuplicateTableError(WeatherCoreError):
    """
    同名表被重复创建

    只会在存储初始化阶段出现，属于致命错误，调用方不应尝试恢复。
    """


class QueryError(WeatherCoreError):
    """语句执行失败（可恢复）"""


class UnknownTableError(QueryError):
    """表名不存在"""

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"表不存在: {table}")


class SchemaMismatchError(QueryError):
    """INSERT 引用了表结构之外的列"""

    def __init__(self, table: str, column: str):
        self.table = table
        self.column = column
        super().__init__(f"表 {table} 中不存在列: {column}")


class MalformedStatementError(QueryError):
    """语句缺少必需的关键字或片段"""


class UnsupportedStatementError(QueryError):
    """语句的起始关键字既不是 SELECT 也不是 INSERT"""
