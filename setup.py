# setup.py
from setuptools import setup, find_packages

setup(
    name="biglisp",
    version="0.1.0",
    description="Reader and tree-walking evaluator for a small Lisp-like expression language",
    packages=find_packages(include=["biglisp", "biglisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
