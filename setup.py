# setup.py
from setuptools import setup, find_packages

setup(
    name="risp",
    version="0.1.0",
    description="RISP: a small Lisp-like expression language interpreter",
    packages=find_packages(include=["risp", "risp.*", "risp_lsp", "risp_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor>=2.1",
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "risp=risp.cli:main",
            "risp-ls=risp_lsp.server:main",
        ],
    },
    zip_safe=False,
)
