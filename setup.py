from setuptools import setup, find_packages

setup(
    name="simpleargparse",
    version="0.1.0",
    description="Declarative command-line flag parser with typed values and word-wrapped help.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "python-json-logger>=3.1",
        "rich>=13.0",
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
