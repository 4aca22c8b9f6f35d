"""
KodeChain Core Setup
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read() if f else ""

setup(
    name="kodechain-core",
    version="0.3.0",
    author="KodeChain SDK Team",
    description="KodeChain call-data codec, sponge hash and ML-DSA-65 wallets",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["kodechain", "kodechain.*"]),
    python_requires=">=3.10",
    install_requires=[
        "dilithium-py>=1.1.0",
        "click>=8.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-timeout>=2.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kodechain=kodechain.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security :: Cryptography",
    ],
    keywords="blockchain abi post-quantum ml-dsa dilithium wallet",
)
