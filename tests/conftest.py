"""
pytest配置文件，定义全局fixtures和测试配置
"""
import tempfile
from pathlib import Path
from typing import Generator
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from src.main import create_app
from src.models.database import Database
from src.repositories.book_repository import BookRepository
from src.services.book_service import BookService


@pytest.fixture
def temp_db_path() -> Generator[str, None, None]:
    """创建临时数据库文件路径"""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as temp_file:
        temp_path = temp_file.name
    yield temp_path
    Path(temp_path).unlink(missing_ok=True)


@pytest_asyncio.fixture
async def test_db(temp_db_path: str) -> Database:
    """创建测试数据库实例"""
    test_database = Database(temp_db_path)
    await test_database.init_db()
    return test_database


@pytest.fixture
def book_repository(test_db: Database) -> BookRepository:
    """基于临时数据库的书籍仓库"""
    return BookRepository(test_db)


@pytest.fixture
def book_service(book_repository: BookRepository) -> BookService:
    """基于临时数据库的书籍服务"""
    return BookService(book_repository)


@pytest.fixture
def client(temp_db_path: str) -> Generator[TestClient, None, None]:
    """创建使用临时数据库的FastAPI测试客户端"""
    app = create_app(temp_db_path)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_book_payload():
    """示例书籍请求数据"""
    return {
        "title": "Dune",
        "author": "Frank Herbert",
        "isbn": "9780441013593",
        "publicationYear": 1965,
        "quantity": 3
    }


def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line(
        "markers", "unit: 单元测试"
    )
    config.addinivalue_line(
        "markers", "integration: 集成测试"
    )
    config.addinivalue_line(
        "markers", "e2e: 端到端测试"
    )
