"""
setup.py (editable-install helper)
---------------------------------
Package metadata for ``pip install -e .``.
"""

from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).resolve().parent
README = (ROOT / "README.md").read_text(encoding="utf-8")

setup(
    # ------------------------------------------------------------------
    # Core metadata
    # ------------------------------------------------------------------
    name="pwinterp",
    version="0.1.0",
    description="Piecewise interpolation with exact derivatives, extrapolation and integrals",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Your-Desk-Quant-Team",
    license="MIT",
    python_requires=">=3.10",

    # ------------------------------------------------------------------
    # Package discovery – src layout
    # ------------------------------------------------------------------
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=("tests", "notebooks")),
    include_package_data=True,

    # ------------------------------------------------------------------
    # Dependencies
    # ------------------------------------------------------------------
    install_requires=[
        "numpy>=1.26",
        "scipy>=1.11",
        "numba>=0.59",
        "pandas>=2.2",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0",
            "ruff>=0.3",
            "black>=24.3",
        ],
        "test": [
            "pytest>=8.0",
        ],
    },

    # ------------------------------------------------------------------
    # Trove classifiers
    # ------------------------------------------------------------------
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Operating System :: OS Independent",
    ],

    zip_safe=False,
)
