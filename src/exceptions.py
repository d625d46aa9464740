"""
业务异常定义
"""
from typing import Dict


class LibraryCatalogException(Exception):
    """基础异常类"""
    pass


class BookNotFoundError(LibraryCatalogException):
    """书籍未找到异常"""

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book not found with id: {book_id}")


class DuplicateIsbnError(LibraryCatalogException):
    """重复ISBN异常"""

    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"Book with ISBN {isbn} already exists")


class BookValidationError(LibraryCatalogException):
    """书籍数据校验失败，errors为 字段名 -> 错误信息"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(errors.values()))
