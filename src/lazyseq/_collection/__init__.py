from ._main import Collection

__all__ = ["Collection"]
