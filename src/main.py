#!/usr/bin/env python3
"""
主应用入口
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.middleware.sessions import SessionMiddleware
import uvicorn

from .config import settings, DEFAULT_SECRET_KEY
from .models.database import Database
from .repositories.book_repository import BookRepository
from .services.book_service import BookService
from .routes.book_routes import book_router, templates
from .routes.api_routes import api_router

# 配置日志
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(db_path: Optional[str] = None) -> FastAPI:
    """创建FastAPI应用，db_path 为空时使用配置中的数据库路径"""
    app = FastAPI(
        title=settings.app_title,
        description="图书馆藏书管理系统",
        version=settings.app_version
    )

    # 配置CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # 闪现消息保存在签名的会话cookie中
    app.add_middleware(SessionMiddleware, secret_key=settings.secret_key)

    # 构建数据访问层和服务层
    database = Database(db_path or settings.database_path)
    book_repository = BookRepository(database)
    app.state.database = database
    app.state.book_repository = book_repository
    app.state.book_service = BookService(book_repository)

    # 注册路由
    app.include_router(book_router)
    app.include_router(api_router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """请求格式错误统一返回400"""
        logger.warning(f"请求参数无效 {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"detail": "Bad Request"})

    @app.on_event("startup")
    async def startup_event():
        """应用启动事件"""
        logger.info("应用启动中...")
        if settings.secret_key == DEFAULT_SECRET_KEY:
            logger.warning("SECRET_KEY 未设置，正在使用默认密钥，会话cookie可被伪造")
        await database.init_db()
        logger.info("数据库连接就绪")

    @app.on_event("shutdown")
    async def shutdown_event():
        """应用关闭事件"""
        logger.info("应用关闭中...")

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def root(request: Request):
        """主页"""
        return templates.TemplateResponse(request, "index.html", {})

    @app.get("/health")
    async def health_check():
        """健康检查接口"""
        total = await book_repository.count()
        return {"status": "healthy", "books": total}

    return app


app = create_app()


def run_server(host: str = settings.host, port: int = settings.port):
    """运行服务器"""
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
