# setup.py
from setuptools import setup, find_packages

setup(
    name="lisk",
    version="0.1.0",
    description="A small S-expression language reader and tree-walking evaluator",
    packages=find_packages(include=["lisk", "lisk.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lisk=lisk.repl:main"],
    },
    zip_safe=False,
)
