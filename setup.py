# setup.py
from setuptools import setup, find_packages

setup(
    name="web-structure",
    version="1.0.1",
    description="Recursive web scraper with concurrent selector extraction and DOM hierarchy awareness",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"web_structure": ["report/templates/*.j2"]},
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "click>=8.1",
        "Jinja2>=3.1",
        "playwright>=1.40",
    ],
    extras_require={
        "tests": [
            "pytest>=7.4,<9.1",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["web-structure=web_structure.cli:cli"],
    },
    python_requires=">=3.11",
)
