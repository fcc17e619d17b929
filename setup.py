"""
tensorparam: typed test parameters and input buffers for tensor op tests
"""

from setuptools import setup, find_packages

# Read README for long description
with open("README.md", "r") as f:
    long_description = f.read()

# Setup configuration
setup(
    name="tensorparam",
    version="0.1.0",
    author="tensorparam Team",
    description="Typed test parameters and input buffers for tensor op tests",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "torch>=2.0.0",
        "numpy>=1.21.0",
        "pytest>=7.0",
    ],
    extras_require={
        "dev": [
            "black>=22.0",
            "isort>=5.0",
        ],
    },
    zip_safe=False,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Framework :: Pytest",
        "Topic :: Software Development :: Testing",
    ],
)
