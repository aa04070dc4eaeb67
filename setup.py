"""
Setup script for useradd-mcp.
"""

from setuptools import setup, find_packages

setup(
    name="useradd-mcp",
    version="0.1.0",
    description="Model Context Protocol server for local user account management",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "mcp>=1.10,<2",
        "pydantic>=2.0",
        "anyio>=4.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "useradd-mcp=useradd_mcp.server:main",
        ],
    },
)
