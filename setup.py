from setuptools import setup, find_packages

setup(
    name="argweave",
    version="0.1.0",
    description="Declarative argument parsing with typed results and bound actions.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.11",
    install_requires=[
        "rich>=13.0",
        "python-json-logger>=3.1",
        "python-dateutil>=2.8",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
