"""
Testes do AiohttpSessionManager
"""
import pytest

from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager
)


class TestAiohttpSessionManager:

    def setup_method(self):
        AiohttpSessionManager.reset_instance()

    def teardown_method(self):
        AiohttpSessionManager.reset_instance()

    def test_singleton(self):
        assert get_aiohttp_session_manager() is get_aiohttp_session_manager()

    @pytest.mark.asyncio
    async def test_session_reused_within_loop(self):
        """REGRA: Mesma sessão dentro do mesmo event loop"""
        manager = AiohttpSessionManager(total_timeout=5, connect_timeout=1, sock_read_timeout=4)

        first = await manager.get_session()
        second = await manager.get_session()

        assert first is second
        assert first.timeout.total == 5
        assert first.timeout.connect == 1
        assert first.timeout.sock_read == 4

        await manager.cleanup()
        assert first.closed

    @pytest.mark.asyncio
    async def test_closed_session_is_recreated(self):
        manager = AiohttpSessionManager()

        first = await manager.get_session()
        await manager.cleanup()
        second = await manager.get_session()

        assert first is not second
        assert not second.closed
        await manager.cleanup()
