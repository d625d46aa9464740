"""
书籍模型
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class Book:
    """书籍模型"""
    title: str
    author: str
    isbn: str  # 唯一业务标识
    publication_year: int
    quantity: int = 1
    id: Optional[int] = None  # 数据库自增主键，首次保存前为空

    def to_dict(self) -> Dict[str, Any]:
        """转换为API输出格式"""
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "publicationYear": self.publication_year,
            "quantity": self.quantity,
        }

    @classmethod
    def from_row(cls, row) -> "Book":
        """从数据库行构建"""
        return cls(
            id=row["id"],
            title=row["title"],
            author=row["author"],
            isbn=row["isbn"],
            publication_year=row["publication_year"],
            quantity=row["quantity"],
        )

    def __repr__(self):
        return f"Book(id={self.id}, isbn='{self.isbn}', title='{self.title}')"
