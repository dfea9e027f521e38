# setup.py
from setuptools import find_packages, setup

setup(
    name="farmstand",
    version="0.1.0",
    packages=find_packages(include=["farmstand", "farmstand.*"]),
    include_package_data=True,
    package_data={"farmstand": ["templates/*.html", "templates/products/*.html"]},
    python_requires=">=3.10",
    install_requires=[
        "fastapi",
        "uvicorn[standard]",
        "jinja2",
        "python-multipart",
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
        "sqlalchemy[asyncio]>=2.0",
        "asyncpg",
        "alembic",
        "psycopg[binary]",
        "structlog",
        "sentry-sdk",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx",
            "aiosqlite",
        ],
    },
    entry_points={
        "console_scripts": [
            "farmstand=farmstand.main:run",
        ],
    },
)
