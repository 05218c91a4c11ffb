"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-02-10
@Docs: Test fixtures for the signup example.
注册示例测试 fixtures。
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from .app import create_app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient for the example app.
    提供示例应用的 httpx AsyncClient。
    """
    transport = ASGITransport(app=create_app(language="zh"))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
