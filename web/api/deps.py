"""Request dependencies."""

from fastapi import Request

from app.container import Container


def get_container(request: Request) -> Container:
    """Container built by the application lifespan."""
    return request.app.state.container
