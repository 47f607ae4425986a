# setup.py
from setuptools import setup, find_packages

setup(
    name="quill",
    version="0.1.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"quill": ["prelude/*.lisp"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
