"""
表结构与种子数据
"""

from loguru import logger

from .config import StorageConfig
from ..storage.table_store import TableStore

USERS_COLUMNS = ["username", "password"]

WEATHER_COLUMNS = [
    "city",
    "temperature",
    "conditions",
    "humidity",
    "wind_speed",
    "date_recorded",
]

SEED_WEATHER = [
    {
        "city": "London",
        "temperature": 18,
        "conditions": "Cloudy",
        "humidity": 72,
        "wind_speed": 14,
        "date_recorded": "2023-01-01T12:00:00Z"
    },
    {
        "city": "Paris",
        "temperature": 21,
        "conditions": "Sunny",
        "humidity": 58,
        "wind_speed": 9,
        "date_recorded": "2023-01-01T12:00:00Z"
    },
    {
        "city": "New York",
        "temperature": 15,
        "conditions": "Rainy",
        "humidity": 81,
        "wind_speed": 22,
        "date_recorded": "2023-01-02T12:00:00Z"
    },
]


def init_store(table_store: TableStore, config: StorageConfig):
    """
    创建固定表结构并写入种子数据

    每个 TableStore 只能调用一次，重复调用会抛出 DuplicateTableError。

    Args:
        table_store: 表存储
        config: 存储配置
    """
    logger.info(f"使用管理员用户 {config.admin_username} 初始化数据库")

    table_store.create_table(config.users_table, USERS_COLUMNS)
    table_store.create_table(config.weather_table, WEATHER_COLUMNS)

    table_store.append_row(config.users_table, {
        "username": config.admin_username,
        "password": config.admin_password
    })

    if config.seed_data:
        for reading in SEED_WEATHER:
            table_store.append_row(config.weather_table, reading)

    logger.info("数据库默认数据初始化完成")
