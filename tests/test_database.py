"""
WeatherCoreDB 测试文件
"""

import pytest

# 添加项目根目录到 Python 路径
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent.parent))

from weathercore.core.database import WeatherCoreDB
from weathercore.core.config import Config, StorageConfig, QueryConfig
from weathercore.core.exceptions import (
    DuplicateTableError,
    MalformedStatementError,
    UnsupportedStatementError,
)
from weathercore.core.schema import SEED_WEATHER


class TestWeatherCoreDB:
    """WeatherCoreDB 测试类"""

    @pytest.fixture
    def db(self):
        """每个测试创建独立的数据库实例"""
        return WeatherCoreDB(Config())

    def test_init_store_schema(self, db):
        """测试初始化后的表结构"""
        assert db.table_store.table_names() == ["users", "weather_data"]
        assert db.table_store.columns("weather_data") == [
            "id", "city", "temperature", "conditions", "humidity", "wind_speed", "date_recorded"
        ]
        assert db.table_store.row_count("weather_data") == len(SEED_WEATHER)

    def test_init_store_twice(self, db):
        """测试重复初始化存储"""
        with pytest.raises(DuplicateTableError):
            db.init_store()

    def test_instances_are_isolated(self):
        """测试不同实例的数据互不影响"""
        first = WeatherCoreDB()
        second = WeatherCoreDB()

        first.table_store.append_row("weather_data", {"city": "Oslo"})

        assert first.table_store.row_count("weather_data") == len(SEED_WEATHER) + 1
        assert second.table_store.row_count("weather_data") == len(SEED_WEATHER)

    @pytest.mark.asyncio
    async def test_admin_lookup(self, db):
        """测试管理员凭据查询"""
        results = await db.execute("SELECT * FROM users WHERE username = 'admin'")

        assert len(results) == 1
        assert results[0]["username"] == "admin"
        assert results[0]["password"] == "admin123"

    @pytest.mark.asyncio
    async def test_admin_injection_attempt(self, db):
        """测试拼接进语句的注入文本不会删除表"""
        username = "admin'; DROP TABLE users; --"
        results = await db.execute(f"SELECT * FROM users WHERE username = '{username}'")

        assert results == []
        assert db.table_store.has_table("users")
        assert db.table_store.row_count("users") == 1

    @pytest.mark.asyncio
    async def test_weather_lookup(self, db):
        """测试按城市查询天气"""
        results = await db.execute("SELECT * FROM weather_data WHERE city = 'Paris'")

        assert len(results) == 1
        assert results[0]["temperature"] == 21
        assert results[0]["conditions"] == "Sunny"

    @pytest.mark.asyncio
    async def test_insert_weather_sample(self, db):
        """测试写入新的天气样本"""
        before = await db.execute("SELECT * FROM weather_data")

        inserted = await db.execute(
            "INSERT INTO weather_data (city, temperature) VALUES ('TestCity', 25)"
        )
        after = await db.execute("SELECT * FROM weather_data")

        assert len(after) == len(before) + 1
        assert inserted[0]["id"] == max(row["id"] for row in before) + 1
        assert inserted[0]["city"] == "TestCity"
        assert inserted[0]["temperature"] == 25
        assert after[-1] == inserted[0]

    @pytest.mark.asyncio
    async def test_errors_reraised(self, db):
        """测试错误向调用方抛出且不修改存储"""
        with pytest.raises(UnsupportedStatementError):
            await db.execute("DELETE FROM users")
        with pytest.raises(MalformedStatementError):
            await db.execute("SELECT * users")

        assert db.table_store.row_count("users") == 1
        assert db.statement_count == 0

    @pytest.mark.asyncio
    async def test_get_statistics(self, db):
        """测试获取统计信息"""
        await db.execute("SELECT * FROM users")
        await db.execute("INSERT INTO weather_data (city) VALUES ('Oslo')")

        stats = await db.get_statistics()

        assert stats["db_id"] == db.db_id
        assert stats["parser_mode"] == "naive"
        assert stats["statements_executed"] == 2
        assert stats["storage_stats"]["total_rows"] == 1 + len(SEED_WEATHER) + 1

    def test_seed_disabled(self):
        """测试关闭种子数据后只保留管理员"""
        config = Config(storage=StorageConfig(seed_data=False, admin_password="s3cret"))
        db = WeatherCoreDB(config)

        assert db.table_store.row_count("weather_data") == 0
        assert db.table_store.all_rows("users")[0]["password"] == "s3cret"

    @pytest.mark.asyncio
    async def test_strict_mode(self):
        """测试严格模式拒绝注入文本"""
        db = WeatherCoreDB(Config(query=QueryConfig(parser_mode="strict")))

        with pytest.raises(MalformedStatementError):
            await db.execute("SELECT * FROM users WHERE username = 'admin'; DROP TABLE users; --")

        results = await db.execute("SELECT * FROM users WHERE username = 'admin'")
        assert len(results) == 1

    @pytest.mark.asyncio
    async def test_async_context_manager(self):
        """测试异步上下文管理器"""
        async with WeatherCoreDB() as db:
            results = await db.execute("SELECT * FROM weather_data")
            assert len(results) == len(SEED_WEATHER)
