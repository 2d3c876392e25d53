from setuptools import setup, find_packages

setup(
    name="ledgersign",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pynacl==1.6.2",
        "base58>=2.1,<3",
    ],
    entry_points={
        "console_scripts": [
            "ledgersign=ledgersign.cli:main",
        ],
    },
    python_requires=">=3.8",
)
