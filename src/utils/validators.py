"""
书籍数据校验
表单和JSON请求在进入服务层之前都经过这里
"""
from typing import Any, Dict, Mapping, Optional

from src.models.book import Book
from src.exceptions import BookValidationError

# 字段名 -> 可接受的输入键（表单/JSON使用驼峰命名）
_FIELD_KEYS = {
    "title": ("title",),
    "author": ("author",),
    "isbn": ("isbn",),
    "publication_year": ("publicationYear", "publication_year"),
    "quantity": ("quantity",),
}

DEFAULT_QUANTITY = 1

# SQLite INTEGER 为有符号64位整数
SQLITE_INT_MIN = -2 ** 63
SQLITE_INT_MAX = 2 ** 63 - 1


def _lookup(data: Mapping[str, Any], field: str) -> Any:
    for key in _FIELD_KEYS[field]:
        if key in data:
            return data[key]
    return None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_int(value: Any) -> Optional[int]:
    """转换为SQLite可存储的整数，失败或越界返回None"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except (TypeError, ValueError):
            return None
    if not SQLITE_INT_MIN <= number <= SQLITE_INT_MAX:
        return None
    return number


def validate_book_data(data: Mapping[str, Any]) -> Book:
    """校验原始书籍数据并构建Book

    必填：title、author、isbn（非空白）和 publicationYear（整数）；
    quantity 缺省或为空时取 1。所有错误一次性收集到 BookValidationError.errors。
    """
    errors: Dict[str, str] = {}
    cleaned: Dict[str, Any] = {}

    for field, label in (("title", "Title"), ("author", "Author"), ("isbn", "ISBN")):
        value = _lookup(data, field)
        if _is_blank(value):
            errors[field] = f"{label} is required"
        else:
            # 原样保存，空白只用于必填判断
            cleaned[field] = str(value)

    year = _lookup(data, "publication_year")
    if _is_blank(year):
        errors["publication_year"] = "Publication year is required"
    else:
        cleaned["publication_year"] = _to_int(year)
        if cleaned["publication_year"] is None:
            errors["publication_year"] = "Publication year must be a number"

    quantity = _lookup(data, "quantity")
    if _is_blank(quantity):
        cleaned["quantity"] = DEFAULT_QUANTITY
    else:
        cleaned["quantity"] = _to_int(quantity)
        if cleaned["quantity"] is None:
            errors["quantity"] = "Quantity must be a number"

    if errors:
        raise BookValidationError(errors)

    return Book(**cleaned)
