"""
WeatherCoreDB 基本使用示例
"""

import asyncio
import json
from pathlib import Path

# 添加项目根目录到 Python 路径
import sys
sys.path.append(str(Path(__file__).parent.parent))

from weathercore.core.database import WeatherCoreDB
from weathercore.core.config import Config
from weathercore.core.exceptions import QueryError
from weathercore.core.logging_setup import setup_logging


async def basic_example():
    """基本使用示例"""
    print("=== WeatherCoreDB 基本使用示例 ===\n")

    config_path = Path(__file__).parent.parent / "config" / "default.yaml"
    config = Config.from_file(str(config_path)) if config_path.exists() else Config()
    setup_logging(config.logging)

    async with WeatherCoreDB(config) as db:
        # 1. 查询全部天气数据
        print("1. 查询全部天气数据...")
        results = await db.execute("SELECT * FROM weather_data")
        for row in results:
            print(f"  {row['id']}: {row['city']} {row['temperature']}°C {row['conditions']}")

        # 2. 按城市查询
        print("\n2. 按城市查询...")
        city = "London"
        results = await db.execute(f"SELECT city, temperature FROM weather_data WHERE city = '{city}'")
        print(f"  {json.dumps(results, ensure_ascii=False)}")

        # 3. 写入新的天气样本
        print("\n3. 写入新的天气样本...")
        inserted = await db.execute(
            "INSERT INTO weather_data (city, temperature, conditions, humidity, wind_speed) "
            "VALUES ('Berlin', 20, 'Sunny', 60, 15)"
        )
        print(f"  新行: {json.dumps(inserted[0], ensure_ascii=False)}")

        # 4. 拼接用户输入的管理员查询
        print("\n4. 拼接用户输入的管理员查询...")
        for username in ["admin", "admin'; DROP TABLE users; --"]:
            results = await db.execute(f"SELECT * FROM users WHERE username = '{username}'")
            print(f"  {username!r} -> {len(results)} 条结果")
        print(f"  users 表仍有 {db.table_store.row_count('users')} 行")

        # 5. 不支持的语句
        print("\n5. 不支持的语句...")
        try:
            await db.execute("DELETE FROM users")
        except QueryError as e:
            print(f"  {type(e).__name__}: {e}")

        # 6. 统计信息
        print("\n6. 统计信息...")
        stats = await db.get_statistics()
        print(json.dumps(stats, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    asyncio.run(basic_example())
