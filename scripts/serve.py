"""
Run the editor API and blog under uvicorn.
"""

from app.settings import settings

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
    )
