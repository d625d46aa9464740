"""
测试fixtures包
"""
from .sample_data import (
    SAMPLE_BOOKS,
    SAMPLE_BOOK_FORMS,
    UNKNOWN_BOOK_ID
)

__all__ = [
    "SAMPLE_BOOKS",
    "SAMPLE_BOOK_FORMS",
    "UNKNOWN_BOOK_ID"
]
