# setup.py
from setuptools import setup, find_packages

setup(
    name="qlisp",
    version="1.0.0",
    description="A small Lisp interpreter with dynamic scoping and a memoizing evaluator",
    packages=find_packages(include=["qlisp", "qlisp.*"]),
    package_data={"qlisp": ["prelude/*.lisp"]},
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["qlisp = qlisp.main:main"],
    },
    zip_safe=False,
)
