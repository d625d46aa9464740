#!/usr/bin/env python3
"""
启动脚本 - 图书馆藏书管理系统
使用方法: python run.py
"""

import logging
import uvicorn

from src.config import settings

# 配置详细日志
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler('debug.log', encoding='utf-8')
    ]
)

# 设置特定模块的日志级别
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)
logging.getLogger("aiosqlite").setLevel(logging.INFO)

if __name__ == "__main__":
    logging.info("=" * 60)
    logging.info("启动图书馆藏书管理系统")
    logging.info(f"数据库: {settings.database_path}")
    logging.info("=" * 60)

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        reload_dirs=["src"],
        log_level="debug"
    )
