# setup.py
from setuptools import setup, find_packages
import os

# Read the version without importing the package
about = {}
with open(os.path.join("pymal", "__init__.py"), encoding="utf-8") as f:
    for line in f:
        if line.startswith("__version__"):
            exec(line, about)

setup(
    name="pymal",
    version=about["__version__"],
    description="A tree-walking interpreter for a small Lisp dialect",
    python_requires=">=3.10",
    packages=find_packages(include=["pymal", "pymal.*"]),
    package_data={"pymal": ["prelude/*.mal"]},
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["pymal = pymal.repl:main"],
    },
    zip_safe=False,
)
