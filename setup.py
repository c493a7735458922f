"""
Setup script for the httpsee interactive HTTP response viewer.
"""

from setuptools import setup, find_packages

setup(
    name="httpsee",
    version="0.1.0",
    description="Interactive HTTP client that renders each response into a managed buffer",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="httpsee Team",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "httpx>=0.27.0",
        "pydantic>=2.0.0",
        "rich>=13.0.0",
        "prompt_toolkit>=3.0.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "httpsee=httpsee.main:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
