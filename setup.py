# setup.py
from setuptools import setup, find_packages

setup(
    name="platylog",
    version="0.1.0",
    description="Leveled console and session-file logging with archive rotation",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",  # Console styling (just_fix_windows_console)
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
