from .api import bp as api_bp

__all__ = ["api_bp"]
