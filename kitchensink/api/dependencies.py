"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from kitchensink.domain.ports import MemberRepository
from kitchensink.domain.registration import MemberService


def get_repository(request: Request) -> MemberRepository:
    """
    Get the member repository from app state.

    The repository is created during app lifespan startup and stored in
    app.state, backed either by the connection pool or by memory.
    """
    return request.app.state.repository


def get_member_service(request: Request) -> MemberService:
    """Create member service with the injected repository."""
    repository = get_repository(request)
    return MemberService(repository=repository)
