from setuptools import setup, find_packages

setup(
    name="fourinarow",
    version="0.1.0",
    description="Two-player Connect Four for the terminal",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",  # board grid
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "fourinarow=fourinarow.interfaces.cli:main",
        ],
    },
)
