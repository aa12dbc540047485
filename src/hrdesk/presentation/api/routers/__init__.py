from hrdesk.presentation.api.routers.operations import router as operations_router

__all__ = ["operations_router"]
