from setuptools import setup, find_packages

setup(
    name="typedgeneric",
    version="0.1.0",
    description="Runtime checked generics for untyped templates",
    long_description=open("README.md", "r").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_dir={"typedgeneric": "typedgeneric"},
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "wrapt>=1.14",
    ],
    extras_require={
        "tests": ["pytest>=7.0"],
    },
)
