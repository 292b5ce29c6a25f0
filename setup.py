from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="gitcontrib",
    version="0.1.0",
    author="GitContrib Team",
    author_email="example@example.com",
    description="Per-author contribution statistics for Git repositories",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/gitcontrib",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "gitpython>=3.1.0",
        "pandas>=1.0.0",
        "plotly>=4.14.0",
        "pyyaml>=5.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gitcontrib=gitcontrib.cli:main",
        ],
    },
)
