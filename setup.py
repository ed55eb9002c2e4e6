""" eots build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import eots

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=eots.name,
    version=eots.__version__,
    license=eots.__license__,
    author=eots.__author__,
    author_email=eots.__author_email__,
    description="Ephemeral One-Time Signatures: Schnorr with a public nonce",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["btclib>=2023.2.20,<2024"],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    keywords="bitcoin cryptography elliptic-curves schnorr bip340 eots nonce-reuse",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
