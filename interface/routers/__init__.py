from interface.routers.user_router import user_router

__all__ = ["user_router"]
