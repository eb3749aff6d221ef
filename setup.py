# setup.py
from setuptools import setup, find_packages

setup(
    name="toylisp",
    version="0.1.0",
    description="A small Lisp-like language with lexical closures",
    packages=find_packages(include=["toylisp", "toylisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["toylisp=toylisp.__main__:main"],
    },
    zip_safe=False,
)
