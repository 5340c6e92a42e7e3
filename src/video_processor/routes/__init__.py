from .process import router as process_router

__all__ = ["process_router"]
