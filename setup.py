# setup.py
from setuptools import setup, find_packages

setup(
    name="cloji",
    version="0.1.0",
    description="Embeddable interpreter for a small Lisp dialect over host objects",
    packages=find_packages(include=["cloji", "cloji.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["cloji=cloji.__main__:main"],
    },
    zip_safe=False,
)
