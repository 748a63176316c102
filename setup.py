from setuptools import setup, find_packages
import os

# Read version from __init__.py
def get_version():
    """Get version from stepwise/__init__.py"""
    init_file = os.path.join(os.path.dirname(__file__), "stepwise", "__init__.py")
    with open(init_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"\'')
    raise RuntimeError("Unable to find version string.")

# Installation Examples:
# - Base package only: pip install stepwise
# - With test tooling: pip install "stepwise[dev]"

extras_require = {
    # Development dependencies
    "dev": [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "coverage>=7.3.2",
    ],
}

setup(
    name="stepwise",
    version=get_version(),
    description="Capability-tiered sequence positions with automatically dispatched distance and advance",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    keywords="positions, indices, cursors, generic algorithms, dispatch",
    packages=find_packages(include=["stepwise", "stepwise.*"]),
    install_requires=[
        "numpy>=1.26.4",  # Fixed-width Distance types and buffer positions
        "PyYAML>=6.0.2",  # Config files
    ],
    extras_require=extras_require,
)
