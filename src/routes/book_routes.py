#!/usr/bin/env python3
"""
书籍管理页面路由
表单提交后统一重定向，结果通过闪现消息展示
"""
from pathlib import Path
from typing import Optional
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..services.book_service import BookService
from ..exceptions import LibraryCatalogException
from ..utils.flash import flash, pop_flashed_messages
from ..utils.validators import validate_book_data
from .dependencies import get_book_service

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))
templates.env.globals["get_flashed_messages"] = pop_flashed_messages

# 创建路由
book_router = APIRouter(prefix="/books", tags=["books-views"], include_in_schema=False)


def _redirect(url: str) -> RedirectResponse:
    # 303: 浏览器用GET跟随POST之后的重定向
    return RedirectResponse(url, status_code=303)


@book_router.get("", response_class=HTMLResponse)
async def list_books(
    request: Request,
    search: Optional[str] = None,
    book_service: BookService = Depends(get_book_service),
):
    """书籍列表页面（可按标题搜索）"""
    if search:
        books = await book_service.search_books_by_title(search)
    else:
        books = await book_service.get_all_books()
    return templates.TemplateResponse(request, "books.html", {"books": books, "search": search or ""})


@book_router.get("/add", response_class=HTMLResponse)
async def show_add_book_form(request: Request):
    """新增书籍表单"""
    return templates.TemplateResponse(request, "add_book.html", {"book": None})


@book_router.post("/add")
async def add_book(request: Request, book_service: BookService = Depends(get_book_service)):
    """处理新增书籍表单"""
    form = await request.form()
    try:
        book = validate_book_data(form)
        await book_service.add_book(book)
    except LibraryCatalogException as e:
        logger.warning(f"新增书籍失败: {e}")
        flash(request, str(e), "error")
        return _redirect("/books/add")

    flash(request, "Book added successfully!")
    return _redirect("/books")


@book_router.get("/edit/{book_id}", response_class=HTMLResponse)
async def show_edit_book_form(
    request: Request,
    book_id: int,
    book_service: BookService = Depends(get_book_service),
):
    """编辑书籍表单"""
    book = await book_service.get_book_by_id(book_id)
    if not book:
        flash(request, "Book not found", "error")
        return _redirect("/books")
    return templates.TemplateResponse(request, "edit_book.html", {"book": book})


@book_router.post("/update/{book_id}")
async def update_book(
    request: Request,
    book_id: int,
    book_service: BookService = Depends(get_book_service),
):
    """处理编辑书籍表单"""
    form = await request.form()
    try:
        book_details = validate_book_data(form)
        await book_service.update_book(book_id, book_details)
    except LibraryCatalogException as e:
        logger.warning(f"更新书籍失败 id={book_id}: {e}")
        flash(request, str(e), "error")
        return _redirect(f"/books/edit/{book_id}")

    flash(request, "Book updated successfully!")
    return _redirect("/books")


@book_router.post("/delete/{book_id}")
async def delete_book(
    request: Request,
    book_id: int,
    book_service: BookService = Depends(get_book_service),
):
    """删除书籍"""
    try:
        await book_service.delete_book(book_id)
        flash(request, "Book deleted successfully!")
    except LibraryCatalogException as e:
        logger.warning(f"删除书籍失败 id={book_id}: {e}")
        flash(request, str(e), "error")
    return _redirect("/books")
