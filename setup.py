from setuptools import setup, find_packages

setup(
    name = "papermeta",
    version = "0.1.0",
    packages = find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiofiles",
        "loguru",
        "pdfplumber",
        "pydantic",
        "PyYAML",
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio>=1.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "papermeta = papermeta.pipeline:cli",
        ],
    },
    python_requires = ">=3.9",
)
