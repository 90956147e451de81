"""
配置管理模块
"""

import os
from typing import Dict, Any, Optional
from dataclasses import dataclass
from pathlib import Path
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigError, ConfigNotFoundError

load_dotenv()


PARSER_MODES = ("naive", "strict")


@dataclass
class StorageConfig:
    """存储配置"""
    users_table: str = "users"
    weather_table: str = "weather_data"

    # 种子数据
    seed_data: bool = True
    admin_username: str = "admin"
    admin_password: str = "admin123"


@dataclass
class QueryConfig:
    """查询配置"""
    # naive: 直接按文本截取操作数; strict: 拒绝带有语句终止符的过滤值
    parser_mode: str = "naive"

    def __post_init__(self):
        """初始化后处理"""
        if self.parser_mode not in PARSER_MODES:
            raise ConfigError(f"未知的解析模式: {self.parser_mode}")


@dataclass
class LoggingConfig:
    """日志配置"""
    level: str = "INFO"
    log_file: Optional[str] = None


class Config:
    """主配置类"""

    def __init__(self,
                 storage: StorageConfig = None,
                 query: QueryConfig = None,
                 logging: LoggingConfig = None):
        """初始化配置"""
        self.storage = storage or StorageConfig()
        self.query = query or QueryConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_file(cls, config_path: str) -> "Config":
        """从配置文件加载配置"""
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigNotFoundError(f"配置文件不存在: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "Config":
        """从字典创建配置"""
        try:
            storage_config = StorageConfig(**config_data.get("storage", {}))
            query_config = QueryConfig(**config_data.get("query", {}))
            logging_config = LoggingConfig(**config_data.get("logging", {}))
        except TypeError as e:
            raise ConfigError(f"配置项无效: {e}") from e

        return cls(
            storage=storage_config,
            query=query_config,
            logging=logging_config
        )

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "storage": self.storage.__dict__,
            "query": self.query.__dict__,
            "logging": self.logging.__dict__
        }

    def save_to_file(self, config_path: str):
        """保存配置到文件"""
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, allow_unicode=True)


# 默认配置
DEFAULT_CONFIG = Config()

# 环境变量配置
def load_config_from_env() -> Config:
    """从环境变量加载配置"""
    config = Config()

    # 存储配置
    if os.getenv("WCDB_SEED_DATA"):
        config.storage.seed_data = os.getenv("WCDB_SEED_DATA").lower() == "true"
    if os.getenv("WCDB_ADMIN_USERNAME"):
        config.storage.admin_username = os.getenv("WCDB_ADMIN_USERNAME")
    if os.getenv("WCDB_ADMIN_PASSWORD"):
        config.storage.admin_password = os.getenv("WCDB_ADMIN_PASSWORD")

    # 查询配置
    if os.getenv("WCDB_PARSER_MODE"):
        config.query = QueryConfig(parser_mode=os.getenv("WCDB_PARSER_MODE"))

    # 日志配置
    if os.getenv("WCDB_LOG_LEVEL"):
        config.logging.level = os.getenv("WCDB_LOG_LEVEL").upper()
    if os.getenv("WCDB_LOG_FILE"):
        config.logging.log_file = os.getenv("WCDB_LOG_FILE")

    return config
