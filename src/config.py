"""
应用配置
从环境变量读取，所有字段都有默认值
"""
import os
from dataclasses import dataclass


DEFAULT_SECRET_KEY = "change-me"


@dataclass
class Settings:
    """应用配置"""
    app_title: str = os.getenv("APP_TITLE", "Library Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    database_path: str = os.getenv("DATABASE_PATH", "data/library.db")
    # 会话cookie签名密钥（闪现消息存放在会话中）
    secret_key: str = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8080"))


settings = Settings()
