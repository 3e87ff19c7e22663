from setuptools import setup, find_packages

setup(
    name="portfolio-terminal",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0",
        "structlog>=23.1",
        "python-dotenv>=1.0",
        "PyYAML>=6.0",
        "httpx>=0.25",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "pytest-httpx>=0.30",
        ],
    },
    entry_points={
        "console_scripts": [
            "portfolio-terminal=portfolio_terminal.cli:main",
        ],
    },
    description="Command interpreter for a terminal-style developer portfolio.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
