from setuptools import setup, find_packages
import pathlib


here = pathlib.Path(__file__).parent
try:
    long_description = (here / "README.md").read_text(encoding="utf-8")
except Exception:
    long_description = "LazySegTree: a segment tree with lazy propagation for range sums and range additions."

setup(
    name="lazysegtree",
    version="0.1.0",
    description="Segment tree with lazy propagation for range-sum queries and range-additive updates",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("docs", "examples", "tests")),
    python_requires='>=3.10',
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "tests": [
            "pytest",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
