from .transcriptions import router as transcriptions_router

__all__ = ["transcriptions_router"]
