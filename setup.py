from setuptools import find_packages, setup

setup(
    name="sbsdiff",
    version="0.1.0",
    description="Side-by-side text diff with character and word highlighting",
    packages=find_packages(include=["sbsdiff", "sbsdiff.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "sbsdiff=sbsdiff.cli:main",
        ],
    },
)
