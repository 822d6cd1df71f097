# setup.py
from setuptools import setup, find_packages

setup(
    name="pairlisp",
    version="0.1.0",
    description="A minimal Lisp expression reader and evaluator",
    packages=find_packages(include=["pairlisp", "pairlisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
