"""Asyncio connections to clients and servers, and the events they produce."""