import os
from typing import List

import fixbytes
from setuptools import setup, find_packages


def read(file_name: str) -> str:
    with open(os.path.join(os.path.dirname(__file__), file_name)) as of:
        return of.read()


def read_requirements(file_name: str) -> List[str]:
    return [line.strip() for line in read(file_name).splitlines() if line.strip() and not line.startswith("#")]


setup(
    name=fixbytes.__title__,
    version=fixbytes.__version__,
    description=fixbytes.__description__,
    license=fixbytes.__license__,
    packages=find_packages(exclude=["test", "test.*"]),
    package_data={"fixbytes": ["py.typed"]},
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.9",
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements-test.txt")},
    classifiers=[
        # Current project status
        "Development Status :: 4 - Beta",
        # Audience
        "Intended Audience :: Developers",
        # License information
        "License :: OSI Approved :: Apache Software License",
        # Supported python versions
        "Programming Language :: Python :: 3.9",
        # Supported OS's
        "Operating System :: POSIX :: Linux",
        "Operating System :: Unix",
        # Extra metadata
        "Natural Language :: English",
        "Topic :: Utilities",
    ],
    keywords="bytes size units configuration",
    url="https://github.com/someengineering/fixinventory/tree/main/fixbytes",
)
