from setuptools import find_namespace_packages, setup


setup(
    name="azure-tts",
    version="0.1.0",
    description="Async client for the Azure Cognitive Services text-to-speech REST API.",
    package_dir={"": "src"},
    packages=find_namespace_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.6",
        "pydantic-settings>=2.2",
        "httpx>=0.27",
        "apscheduler>=3.10,<4",
        "structlog>=24.1",
        "rich>=13.7",
        "typer>=0.12",
    ],
    extras_require={
        "dev": ["pytest>=8.0", "pytest-asyncio>=0.23", "ruff>=0.6", "mypy>=1.8"],
    },
    entry_points={"console_scripts": ["azure-tts=azure_tts.cli:app"]},
)
