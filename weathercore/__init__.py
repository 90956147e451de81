"""
WeatherCoreDB - 天气服务的内存数据库

一个极简的内存表存储，配合按文本截取操作数的 SELECT / INSERT 执行器。
"""

__version__ = "0.1.0"
__author__ = "WeatherCoreDB Team"

from .core.database import WeatherCoreDB
from .core.config import Config

__all__ = ["WeatherCoreDB", "Config"]
