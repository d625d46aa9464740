"""
应用启动集成测试
"""
import logging
import pytest
from fastapi.testclient import TestClient

from src.main import create_app
from src.config import settings, DEFAULT_SECRET_KEY


@pytest.mark.integration
class TestAppStartup:
    """应用启动测试类"""

    def test_warns_when_default_secret_key(self, temp_db_path, monkeypatch, caplog):
        """测试使用默认SECRET_KEY时启动记录警告"""
        monkeypatch.setattr(settings, "secret_key", DEFAULT_SECRET_KEY)

        with caplog.at_level(logging.WARNING, logger="src.main"):
            with TestClient(create_app(temp_db_path)):
                pass

        assert any("SECRET_KEY" in record.getMessage() for record in caplog.records)

    def test_no_warning_with_custom_secret_key(self, temp_db_path, monkeypatch, caplog):
        """测试设置了SECRET_KEY时不记录警告"""
        monkeypatch.setattr(settings, "secret_key", "a-real-secret")

        with caplog.at_level(logging.WARNING, logger="src.main"):
            with TestClient(create_app(temp_db_path)):
                pass

        assert not any("SECRET_KEY" in record.getMessage() for record in caplog.records)
