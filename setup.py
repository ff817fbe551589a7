from setuptools import find_packages, setup

setup(
    name="doclinks",
    version="0.1.0",
    description="Markdown documentation link checker",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML display output
        "httpx",  # Async external link probes
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-asyncio>=0.23",  # Coroutine tests
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "doclinks=doclinks.cli:main",
        ],
    },
)
