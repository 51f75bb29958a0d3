from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="lutinterp",
    version="0.1.0",
    description="Two-dimensional look-up tables with bilinear standardization",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    # Keep regular pip installs lightweight; pandas and matplotlib are only
    # needed for dataframe tables and plots.
    install_requires=["numpy"],
    extras_require={
        "dataframe": ["pandas", "pyarrow"],
        "plot": ["matplotlib"],
        "test": ["pytest", "pandas", "matplotlib"],
    },
    entry_points={"console_scripts": ["lutinterp=lutinterp.driver:main"]},
)
