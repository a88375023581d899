import os
from setuptools import setup, find_packages
from susy2md import __version__, __description__, __author__, __author_email__, __url__, __license__

def read_long_description():
    """Read README.md for PyPI long description (rendered as markdown)"""
    if os.path.exists("README.md"):
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    return __description__

setup(
    # -------------------------- BASIC INFO --------------------------
    name="susy2md",
    version=__version__,
    author=__author__,
    author_email=__author_email__,
    description=__description__,
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    url=__url__,
    license=__license__,
    keywords=["scraper", "markdown", "course", "assignments", "html2md"],
    # ----------------------------------------------------------------

    # -------------------------- PACKAGE STRUCTURE --------------------------
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # -----------------------------------------------------------------------

    # -------------------------- DEPENDENCIES --------------------------
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "markdownify>=0.11.6",
        "lxml>=4.9.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    # ------------------------------------------------------------------

    # -------------------------- CLI ENTRY POINT --------------------------
    # Global CLI command: `susy2md`
    entry_points={
        "console_scripts": [
            "susy2md = susy2md.cli:main",
        ]
    },
    # ----------------------------------------------------------------------

    # -------------------------- COMPATIBILITY --------------------------
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Text Processing :: Markup :: HTML",
        "Topic :: Text Processing :: Markup :: Markdown"
    ]
    # -------------------------------------------------------------------
)
