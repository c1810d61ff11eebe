"""Build configuration for parsequery."""
from setuptools import setup, find_packages

setup(
    name="parsequery",
    version="1.0.0",
    description="Parse URL query strings into dicts with pluggable decoding.",
    license="MIT",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "click>=8.0",
        "werkzeug>=2.3",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "parsequery = parsequery.cli:main",
        ],
    },
)
