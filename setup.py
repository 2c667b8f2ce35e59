from setuptools import find_packages, setup

setup(
    name="doclinks",
    version="0.1.0",
    description="External link checker for markdown documentation trees",
    packages=find_packages(include=["doclinks", "doclinks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "click",  # CLI usage errors
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "aiohttp>=3.8",  # Async HTTP liveness checks
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "doclinks=doclinks.cli:main",
        ],
    },
)
