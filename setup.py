"""Package setup for teamkit."""

from setuptools import setup, find_packages

setup(
    name="teamkit",
    version="0.3.0",
    description="Add team members and welcome them over chat",
    packages=find_packages(include=["teamkit_cli", "teamkit_cli.*", "teamkit_sdk", "teamkit_sdk.*"]),
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.24.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0",
        "click>=8.0.0",
        "typer>=0.9.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "teamkit=teamkit_cli.cli:app",
        ],
    },
)
