from setuptools import find_packages, setup

setup(
    name="onedriver-launcher",
    version="0.1.0",
    description="Desktop launcher for onedriver mountpoints managed as systemd user units",
    packages=find_packages(include=["onedriver_launcher", "onedriver_launcher.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and command output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; cli.main catches real click exceptions)
        "click",  # CLI error types used directly in cli.main
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for the systemd unit file
        "PyGObject",  # GTK 3 launcher window
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "onedriver-launcher=onedriver_launcher.cli:main",
        ],
    },
)
