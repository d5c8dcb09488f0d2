from .colorExpressions import router as colorExpressions_router

__all__ = ["colorExpressions_router"]
