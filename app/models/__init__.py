# app/models/__init__.py
# Import models so they are registered in the ORM metadata
from .pincode import Pincode

__all__ = ["Pincode"]
