from setuptools import setup, find_packages

setup(
    name="rollback-dfa",
    version="0.1.0",
    description="Deterministic finite automata with stepwise rollback and longest-match lexing",
    author="Anonymous",
    packages=find_packages(include=["rollback_dfa", "rollback_dfa.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "examples": [
            "tqdm>=4.65.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "mypy>=1.0.0",
        ],
    },
)
