"""
核心模块 - 数据库的主要组件
"""
from .config import Config
from .exceptions import WeatherCoreError, QueryError
from .database import WeatherCoreDB

__all__ = ["WeatherCoreDB", "Config", "WeatherCoreError", "QueryError"]
