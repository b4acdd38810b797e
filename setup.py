from setuptools import find_packages, setup

setup(
    name="dirview",
    version="0.1.0",
    description="Terminal directory browser",
    python_requires=">=3.12",
    packages=find_packages(include=["dirview", "dirview.*"]),
    install_requires=[
        "textual>=0.80",
        "rich>=13.7",
        "typer>=0.12",
        "result>=0.17",
    ],
    extras_require={
        "test": ["pytest>=8", "pytest-asyncio>=0.23"],
    },
    entry_points={
        "console_scripts": ["dirview=dirview.cli.app:cli"],
    },
)
