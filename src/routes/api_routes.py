#!/usr/bin/env python3
"""
书籍JSON API路由
失败时只返回对应的状态码，不携带额外的错误细节
"""
from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import BaseModel, ConfigDict, Field

from ..services.book_service import BookService
from ..exceptions import BookNotFoundError, BookValidationError, DuplicateIsbnError
from ..utils.validators import validate_book_data
from .dependencies import get_book_service

logger = logging.getLogger(__name__)

# 创建路由
api_router = APIRouter(prefix="/books/api", tags=["books"])


class BookRequest(BaseModel):
    """新增/更新书籍请求，必填校验由 validate_book_data 负责"""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    author: Optional[str] = None
    isbn: Optional[str] = None
    publication_year: Optional[int] = Field(None, alias="publicationYear")
    quantity: Optional[int] = None


@api_router.get("")
async def get_all_books(book_service: BookService = Depends(get_book_service)):
    """获取所有书籍"""
    books = await book_service.get_all_books()
    return [book.to_dict() for book in books]


@api_router.get("/search")
async def search_books(
    title: Optional[str] = Query(None, description="标题关键字（忽略大小写）"),
    author: Optional[str] = Query(None, description="作者（精确匹配）"),
    book_service: BookService = Depends(get_book_service),
):
    """按标题或作者搜索书籍，两者同时给出时取交集"""
    if not title and not author:
        raise HTTPException(status_code=400)

    if author:
        books = await book_service.get_books_by_author(author)
        if title:
            keyword = title.casefold()
            books = [book for book in books if keyword in book.title.casefold()]
    else:
        books = await book_service.search_books_by_title(title)
    return [book.to_dict() for book in books]


@api_router.get("/isbn/{isbn}")
async def get_book_by_isbn(isbn: str, book_service: BookService = Depends(get_book_service)):
    """根据ISBN获取书籍"""
    book = await book_service.get_book_by_isbn(isbn)
    if not book:
        raise HTTPException(status_code=404)
    return book.to_dict()


@api_router.get("/{book_id}")
async def get_book(book_id: int, book_service: BookService = Depends(get_book_service)):
    """根据ID获取书籍"""
    book = await book_service.get_book_by_id(book_id)
    if not book:
        raise HTTPException(status_code=404)
    return book.to_dict()


@api_router.post("", status_code=201)
async def add_book(request: BookRequest, book_service: BookService = Depends(get_book_service)):
    """新增书籍"""
    try:
        book = validate_book_data(request.model_dump())
        saved_book = await book_service.add_book(book)
    except (BookValidationError, DuplicateIsbnError) as e:
        logger.warning(f"新增书籍失败: {e}")
        raise HTTPException(status_code=400)
    return saved_book.to_dict()


@api_router.put("/{book_id}")
async def update_book(
    book_id: int,
    request: BookRequest,
    book_service: BookService = Depends(get_book_service),
):
    """更新书籍，校验失败、ID不存在或ISBN冲突都返回404"""
    try:
        book_details = validate_book_data(request.model_dump())
        updated_book = await book_service.update_book(book_id, book_details)
    except (BookNotFoundError, BookValidationError, DuplicateIsbnError) as e:
        logger.warning(f"更新书籍失败 id={book_id}: {e}")
        raise HTTPException(status_code=404)
    return updated_book.to_dict()


@api_router.delete("/{book_id}", status_code=204)
async def delete_book(book_id: int, book_service: BookService = Depends(get_book_service)):
    """删除书籍"""
    try:
        await book_service.delete_book(book_id)
    except BookNotFoundError as e:
        logger.warning(f"删除书籍失败: {e}")
        raise HTTPException(status_code=404)
    return Response(status_code=204)
