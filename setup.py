#!/usr/bin/env python

"""The setup script."""

from setuptools import setup, find_packages

with open("README.rst", encoding="UTF-8") as readme_file:
    readme = readme_file.read()

with open("requirements.txt", encoding="UTF-8") as requirements_file:
    requirements = requirements_file.readlines()

test_requirements = [
    "pytest>=3",
]

extras_requirements = {"tests": test_requirements}

setup(
    author="Daniele De Gregorio",
    author_email="daniele.degregorio@eyecan.ai",
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    description="remaining time estimation for unit-of-work based tasks",
    install_requires=requirements,
    extras_require=extras_requirements,
    license="GNU General Public License v3",
    long_description=readme,
    include_package_data=True,
    keywords=["elapsedtime", "eta", "estimator", "stopwatch", "progress"],
    name="elapsedtime",
    packages=find_packages(include=["elapsedtime", "elapsedtime.*"]),
    test_suite="tests",
    tests_require=test_requirements,
    url="https://github.com/eyecan-ai/elapsedtime",
    version="0.1.0",
    zip_safe=False,
)
