# setup.py
"""
Setup configuration for bashpy package
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="bashpy",
    version="0.1.0",
    description="Bash idioms side by side with Python, plus small worked-example scripts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Topic :: System :: Shells",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.25",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=21.0",
            "flake8>=3.9",
        ],
    },
    entry_points={
        "console_scripts": [
            "bashpy=bashpy.cli:main",
            "count-error=bashpy.cli:count_error_main",
            "read-region=bashpy.cli:read_region_main",
            "list-large-files=bashpy.cli:list_large_files_main",
            "greet=bashpy.cli:greet_main",
            "check-url=bashpy.cli:check_url_main",
        ],
    },
)
