"""
路由依赖：从应用状态中取出启动时构建的服务实例
"""
from fastapi import Request

from ..services.book_service import BookService


def get_book_service(request: Request) -> BookService:
    """获取书籍服务"""
    return request.app.state.book_service
