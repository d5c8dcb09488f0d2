"""
Color Suggest MCP Server - FastAPI implementation
Suggests Less/Sass color function expressions between two colors
"""

import logging
import sys
from pathlib import Path
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Ensure project root is on sys.path for package imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

from routers import colorExpressions_router
from routers.colorExpressions import get_settings

app = FastAPI(
    title="Color Suggest MCP Server",
    description="A FastAPI server suggesting CSS preprocessor color expressions",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

app.include_router(colorExpressions_router)

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    uvicorn.run(app, host=settings.host, port=settings.port)
