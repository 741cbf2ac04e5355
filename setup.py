# setup.py
from setuptools import setup, find_packages

setup(
    name="sitemap-helper",
    version="0.1.0",
    description="Breadth-first site crawler and sitemap.xml generator / parser",
    packages=find_packages(include=["sitemap_helper", "sitemap_helper.*"]),
    package_data={"sitemap_helper.report": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "lxml>=5.0",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
        "Jinja2>=3.1",
        "playwright>=1.40",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["sitemap-helper=sitemap_helper.cli:main"],
    },
    python_requires=">=3.11",
)
