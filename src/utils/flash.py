"""
闪现消息：重定向前写入会话，下一次页面渲染时取出并清除
依赖 SessionMiddleware
"""
from typing import Dict, List

from fastapi import Request

_FLASH_KEY = "_flash"


def flash(request: Request, message: str, category: str = "success") -> None:
    """写入一条闪现消息"""
    messages = request.session.get(_FLASH_KEY, [])
    messages.append({"category": category, "message": message})
    request.session[_FLASH_KEY] = messages


def pop_flashed_messages(request: Request) -> List[Dict[str, str]]:
    """取出并清除所有闪现消息"""
    return request.session.pop(_FLASH_KEY, [])
