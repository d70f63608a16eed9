from uvicorn import run
from brand_admin.settings import get_settings


def main():
    settings = get_settings()
    run(
        "brand_admin.app:app",
        host=settings.SERVER.HOST,
        port=settings.SERVER.PORT,
        workers=settings.SERVER.WORKERS,
        reload=settings.SERVER.RELOAD,
        reload_dirs=["brand_admin"],
        reload_excludes=["__pycache__", "*.pyc", "*.pyo", "*.pyd", "*.pyw", "*.pyz"],
        reload_includes=["*.py", "*.html"],
    )

if __name__ == "__main__":
    main()
