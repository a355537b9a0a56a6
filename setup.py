"""setuptools setup for Hourglass.

Install for development:
    pip install -e ".[test]"
    python -m hourglass --countdown --start 0:05:00
"""

from setuptools import setup, find_packages

setup(
    name="hourglass",
    version="0.1.0",
    description="Countable-time engine with count-up and countdown modes",
    packages=find_packages(include=["hourglass", "hourglass.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["hourglass = hourglass.__main__:main"]},
)
