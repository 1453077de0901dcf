"""setup.py for lexico.

Pure Python, nothing to compile.
Install with: pip install .
Tests:        pip install .[test] && pytest test/
Benchmarks:   pip install .[test,bench] && pytest test/test_benchmark_json.py -s
"""

from setuptools import setup

setup(
    name="lexico",
    version="0.1.0",
    description="Declarative parser combinators with backtracking and cut.",
    license="MIT",
    python_requires=">=3.8",
    packages=["lexico"],
    zip_safe=False,
    extras_require={
        "test": ["pytest"],
        "bench": ["lark", "parsimonious", "pe", "pyparsing"],
    },
)
