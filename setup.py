#!/usr/bin/env python

# Support setuptools only, distutils has a divergent and more annoying API and
# few folks will lack setuptools.
from setuptools import setup, find_packages

# Version info -- read without importing
_locals = {}
with open("cmdbind/_version.py") as fp:
    exec(fp.read(), None, _locals)
version = _locals["__version__"]

exclude = ["tests", "tests.*"]

setup(
    name="cmdbind",
    version=version,
    description="Declarative command-line argument binding",
    license="BSD",
    long_description=open("README.rst").read(),
    python_requires=">=3.8",
    packages=find_packages(exclude=exclude),
    include_package_data=True,
    install_requires=["lexicon>=2.0", "PyYAML>=5.1"],
    extras_require={"test": ["pytest>=7", "pytest-relaxed>=2"]},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Software Development :: User Interfaces",
    ],
)
