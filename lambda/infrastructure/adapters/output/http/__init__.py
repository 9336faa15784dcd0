"""HTTP client helpers"""
from .aiohttp_session_manager import AiohttpSessionManager, get_aiohttp_session_manager

__all__ = ['AiohttpSessionManager', 'get_aiohttp_session_manager']
