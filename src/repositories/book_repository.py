"""
书籍数据访问层
"""
from typing import List, Optional
from dataclasses import replace
import logging

import aiosqlite

from src.models.book import Book
from src.models.database import Database
from src.exceptions import DuplicateIsbnError

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, author, isbn, publication_year, quantity"


class BookRepository:
    """书籍仓库类"""

    def __init__(self, database: Database):
        self.database = database

    async def save(self, book: Book) -> Book:
        """保存书籍：id为空时插入并分配新id，否则按id覆盖"""
        try:
            async with self.database.get_connection() as conn:
                if book.id is None:
                    cursor = await conn.execute(
                        """
                        INSERT INTO books (title, author, isbn, publication_year, quantity)
                        VALUES (?, ?, ?, ?, ?)
                        """,
                        (book.title, book.author, book.isbn, book.publication_year, book.quantity),
                    )
                    return replace(book, id=cursor.lastrowid)

                await conn.execute(
                    """
                    UPDATE books
                    SET title = ?, author = ?, isbn = ?, publication_year = ?, quantity = ?
                    WHERE id = ?
                    """,
                    (book.title, book.author, book.isbn, book.publication_year, book.quantity, book.id),
                )
                return book
        except aiosqlite.IntegrityError as e:
            if "isbn" not in str(e):
                raise
            logger.debug(f"保存书籍违反isbn唯一约束: {e}")
            raise DuplicateIsbnError(book.isbn) from e

    async def find_by_id(self, book_id: int) -> Optional[Book]:
        """根据ID获取书籍"""
        return await self._fetch_one(f"SELECT {_COLUMNS} FROM books WHERE id = ?", (book_id,))

    async def find_by_isbn(self, isbn: str) -> Optional[Book]:
        """根据ISBN获取书籍（精确匹配）"""
        return await self._fetch_one(f"SELECT {_COLUMNS} FROM books WHERE isbn = ?", (isbn,))

    async def find_by_author(self, author: str) -> List[Book]:
        """根据作者获取书籍（精确匹配）"""
        return await self._fetch_all(
            f"SELECT {_COLUMNS} FROM books WHERE author = ? ORDER BY id", (author,)
        )

    async def find_by_title_containing(self, text: str) -> List[Book]:
        """根据标题搜索书籍（忽略大小写的子串匹配）"""
        return await self._fetch_all(
            f"SELECT {_COLUMNS} FROM books WHERE instr(casefold(title), casefold(?)) > 0 ORDER BY id",
            (text,),
        )

    async def find_all(self) -> List[Book]:
        """获取所有书籍"""
        return await self._fetch_all(f"SELECT {_COLUMNS} FROM books ORDER BY id")

    async def delete(self, book: Book) -> None:
        """删除书籍"""
        async with self.database.get_connection() as conn:
            await conn.execute("DELETE FROM books WHERE id = ?", (book.id,))

    async def count(self) -> int:
        """书籍总数"""
        async with self.database.get_connection() as conn:
            cursor = await conn.execute("SELECT COUNT(*) AS total FROM books")
            row = await cursor.fetchone()
            return row["total"]

    async def _fetch_one(self, query: str, params: tuple = ()) -> Optional[Book]:
        async with self.database.get_connection() as conn:
            cursor = await conn.execute(query, params)
            row = await cursor.fetchone()
            return Book.from_row(row) if row else None

    async def _fetch_all(self, query: str, params: tuple = ()) -> List[Book]:
        async with self.database.get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [Book.from_row(row) for row in rows]
