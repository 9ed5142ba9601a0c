# -*- coding: utf-8 -*-

from setuptools import setup, find_packages


setup(
    name="modmsgcheck",
    version="0.1.0",
    description="Find tracker module messages that were stored as code page 437 text",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["modmsgcheck", "modmsgcheck.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["parameterized"],
    },
    entry_points={"console_scripts": []},
    scripts=["tools/checkMessages.py"],
    classifiers=[
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
)
