#!/usr/bin/env python3
"""
数据库连接管理
使用SQLite作为持久化存储
"""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator
import logging

import aiosqlite

logger = logging.getLogger(__name__)


def _casefold(value):
    """SQL函数 casefold()：Unicode大小写折叠，SQLite自带的LOWER只处理ASCII"""
    return value.casefold() if isinstance(value, str) else value


class Database:
    """数据库连接管理器"""

    def __init__(self, db_path: str = "data/library.db"):
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    @asynccontextmanager
    async def get_connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """获取数据库连接的上下文管理器，正常退出时提交，异常时回滚"""
        async with aiosqlite.connect(self.db_path) as conn:
            conn.row_factory = aiosqlite.Row
            await conn.create_function("casefold", 1, _casefold, deterministic=True)
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    async def init_db(self):
        """初始化数据库表结构"""
        async with self.get_connection() as conn:
            # AUTOINCREMENT保证删除后的id不会被复用
            await conn.execute("""
                CREATE TABLE IF NOT EXISTS books (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    author TEXT NOT NULL,
                    isbn TEXT UNIQUE NOT NULL,
                    publication_year INTEGER NOT NULL,
                    quantity INTEGER NOT NULL DEFAULT 1
                )
            """)

            indexes = [
                "CREATE INDEX IF NOT EXISTS idx_books_author ON books(author)",
                "CREATE INDEX IF NOT EXISTS idx_books_title ON books(title)",
            ]
            for index_sql in indexes:
                await conn.execute(index_sql)

        logger.info(f"数据库初始化完成: {self.db_path}")
