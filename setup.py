# setup.py
from setuptools import setup, find_packages

setup(
    name="lil",
    version="0.1.0",
    description="A small Lisp interpreter: reader, lexical closures, let, quote and eval",
    packages=find_packages(include=["lil", "lil.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
