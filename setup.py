from setuptools import setup, find_packages

setup(
    name="bidlogic",
    version="0.1.0",
    packages=find_packages(include=["bidlogic", "bidlogic.*"]),
    python_requires=">=3.7",
    install_requires=[
        "absl-py",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "bidlogic-replay=bidlogic.replay:run",
        ],
    },
)
