# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="places-api",
    version="0.0.1",
    packages=find_namespace_packages(include=["app", "app.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "SQLAlchemy[asyncio]>=2.0",
        "asyncpg>=0.29",
        "structlog>=24.1",
        "sentry-sdk>=1.40",
        "uvicorn>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.27",
            "python-dotenv>=1.0",
        ],
    },
)
