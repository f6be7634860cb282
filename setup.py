#!/usr/bin/env python

from setuptools import setup

setup(
    name="pbxedit",
    version="0.1.0",
    packages=[
        "pbxedit",
        "pbxedit.details",
        "pbxedit.details.tools",
        "pbxedit.project",
    ],
    python_requires=">=3.9",
    install_requires=["openstep-parser>=1.5"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["pbxedit = pbxedit.__main__:main"]},
)
