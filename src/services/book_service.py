"""
书籍业务服务层
"""
import asyncio
import logging
from typing import List, Optional

from src.repositories.book_repository import BookRepository
from src.models.book import Book
from src.exceptions import BookNotFoundError, DuplicateIsbnError

logger = logging.getLogger(__name__)


class BookService:
    """书籍服务类

    写操作（新增、更新、删除）在同一把锁内完成"先检查后写入"，
    避免同一进程内的并发请求同时通过ISBN唯一性或存在性检查。
    """

    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository
        self._write_lock = asyncio.Lock()

    async def get_all_books(self) -> List[Book]:
        """获取所有书籍"""
        return await self.book_repository.find_all()

    async def get_book_by_id(self, book_id: int) -> Optional[Book]:
        """根据ID获取书籍"""
        return await self.book_repository.find_by_id(book_id)

    async def get_book_by_isbn(self, isbn: str) -> Optional[Book]:
        """根据ISBN获取书籍"""
        return await self.book_repository.find_by_isbn(isbn)

    async def get_books_by_author(self, author: str) -> List[Book]:
        """根据作者获取书籍"""
        return await self.book_repository.find_by_author(author)

    async def search_books_by_title(self, title: str) -> List[Book]:
        """根据标题搜索书籍（忽略大小写）"""
        return await self.book_repository.find_by_title_containing(title)

    async def add_book(self, book: Book) -> Book:
        """新增书籍"""
        async with self._write_lock:
            # 检查ISBN是否已存在
            existing_book = await self.book_repository.find_by_isbn(book.isbn)
            if existing_book:
                raise DuplicateIsbnError(book.isbn)

            saved_book = await self.book_repository.save(book)
        logger.info(f"新增书籍: {saved_book!r}")
        return saved_book

    async def update_book(self, book_id: int, book_details: Book) -> Book:
        """更新书籍，除id外的字段整体覆盖

        这里不重新检查ISBN唯一性，与其他书籍冲突时由存储层的唯一约束拒绝。
        """
        async with self._write_lock:
            book = await self.book_repository.find_by_id(book_id)
            if not book:
                raise BookNotFoundError(book_id)

            book.title = book_details.title
            book.author = book_details.author
            book.isbn = book_details.isbn
            book.publication_year = book_details.publication_year
            book.quantity = book_details.quantity

            updated_book = await self.book_repository.save(book)
        logger.info(f"更新书籍: {updated_book!r}")
        return updated_book

    async def delete_book(self, book_id: int) -> None:
        """删除书籍"""
        async with self._write_lock:
            book = await self.book_repository.find_by_id(book_id)
            if not book:
                raise BookNotFoundError(book_id)

            await self.book_repository.delete(book)
        logger.info(f"删除书籍: id={book_id}")
