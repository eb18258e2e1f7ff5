# setup.py
from setuptools import setup, find_packages

setup(
    name="conslisp",
    version="0.1.0",
    description="A small parenthesized Lisp-like expression interpreter",
    packages=find_packages(include=["conslisp", "conslisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["conslisp=conslisp.__main__:main"],
    },
    zip_safe=False,
)
