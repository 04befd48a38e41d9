from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="csf2det",
    version="0.1.0",
    description="Expand GUGA configuration state functions into Slater determinants",
    python_requires=">=3.9",
    packages=find_packages(include=["csf2det", "csf2det.*"]),
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["csf2det = csf2det.cli.main:main"]},
)
