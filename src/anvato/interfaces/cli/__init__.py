from .cli import start

__all__ = ["start"]
