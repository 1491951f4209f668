from pathlib import Path

from setuptools import find_packages, setup

setup(
    name="liteset",
    version="0.1.0",
    description="Set of objects stored in a single list, with constant time add and remove.",
    long_description=Path("README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    keywords="set collection data-structure",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=Path("requirements.txt").read_text(encoding="utf-8").splitlines(),
    extras_require={
        "test": ["pytest", "hypothesis", "coverage"],
        "fuzz": ["hypothesis", "hypofuzz"],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    zip_safe=False,
)
