# Interfaces Package
from .login_store_port import LoginStorePort

__all__ = ["LoginStorePort"]
