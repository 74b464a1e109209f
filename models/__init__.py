# models/__init__.py

from models import customer

__all__ = [
    "customer",
]
