from mypyc.build import mypycify
from setuptools import setup

setup(
    name="quadint",
    version="0.1.0",
    description="Exact arithmetic on quadratic integers, with a Euclidean gcd that reports when it cannot be trusted",

    packages=["quadint"],

    # The number types and the lattice search are compiled; the exceptions stay interpreted so that
    # they can be subclassed and caught like any other Python exception.
    ext_modules=mypycify([
        "quadint/quad.py",
        "quadint/bounding.py",
    ]),

    install_requires=["sympy"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.9",

    license="MIT",
)
