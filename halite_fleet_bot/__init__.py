from .main import agent

__all__ = ["agent"]
