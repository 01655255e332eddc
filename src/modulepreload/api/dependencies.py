from fastapi import Request

from modulepreload.config import ServerConfig


def get_config(request: Request) -> ServerConfig:
    """Return the ``ServerConfig`` the application was created with."""
    config: ServerConfig = request.app.state.config
    return config
