from __future__ import annotations
from fastapi import Request
from app.service.user_service import UserService

def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service

async def read_body(request: Request) -> bytes:
    """Raw request body, read on the event loop so the route itself can stay sync."""
    return await request.body()
