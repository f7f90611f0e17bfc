from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="mstbench",
    version="0.1.0",
    description="Prim's and Kruskal's minimum spanning trees with comparable performance metrics",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "pandas",
        "joblib",
        "matplotlib",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["mstbench = mstbench.cli:main"]},
)
