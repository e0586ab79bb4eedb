# setup.py - Build the text tightness packages
from setuptools import setup

setup(
    name="text_tightness",
    version="0.1.0",
    description="Character-bitmap dispersion and Jenks partitioning of short texts around a center text",
    packages=["text_tightness", "core"],
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
