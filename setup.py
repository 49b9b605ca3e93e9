from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="consolekit",
    version="0.1.0",
    description="Styled output, IO streams and aligned text layouts for console applications",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="http://github.com/consolekit/consolekit",
    author="consolekit contributors",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"consolekit": ["py.typed"]},
    python_requires=">=3.8",
    install_requires=[
        "rich>=12.0.0",
        "typing_extensions>=4.0.0",
    ],
    extras_require={
        "testing": [
            "pytest",
            "pytest-cov",
        ],
        "type-checking": [
            "mypy",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
