from setuptools import setup, find_packages

setup(
    name="notion_blocks_markdown",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "notion-client>=2.2.1",
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.2",
        "fastapi>=0.109.0",
        "uvicorn>=0.27.0",
        "requests>=2.31.0",
        "Pillow>=10.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
            "httpx>=0.26.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "notion-blocks-markdown=notion_blocks_markdown.main:main",
            "notion-blocks-markdown-server=notion_blocks_markdown.server:run",
        ],
    },
    python_requires=">=3.10",
)
