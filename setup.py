"""
Setup script for learnsphere.

LearnSphere is a deterministic, in-memory skill-mastery engine. It turns
a stream of performance signals, delivered in strict RVKA channel rotation
(reading, visual, kinesthetic, auditory), into per-skill mastery state for
each learner.

The 'learnsphere' command provides developer tooling (next-channel lookup
and event replay).
"""

from setuptools import find_packages, setup

setup(
    name="learnsphere",
    version="0.1.0",
    description="Deterministic skill-mastery engine with RVKA channel sequencing",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["learnsphere", "learnsphere.*"]),
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "learnsphere=learnsphere.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning mastery knowledge-tracing education cognitive",
)
