# setup.py
from setuptools import setup, find_packages

setup(
    name="qlisp",
    version="1.0.0",
    description="A minimal Lisp: s-expression reader and tree-walking evaluator",
    packages=find_packages(include=["qlisp", "qlisp.*"]),
    package_data={"qlisp": ["stdlib/*.lisp"]},
    python_requires=">=3.10",
    install_requires=[
        "psutil",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["qlisp=qlisp.__main__:main"],
    },
    zip_safe=False,
)
