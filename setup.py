from setuptools import setup, find_packages

setup(
    name="dice-algebra",
    version="0.1.0",
    description="Evaluate dice algebra expressions with a narrated trace of every roll",
    author="Samuel",
    python_requires=">=3.11",
    packages=find_packages(include=["dicealgebra", "dicealgebra.*"]),
    install_requires=[
        "colorama>=0.4.6",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.12.0",
            "mypy>=1.7.0",
            "pylint>=3.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "dice-algebra=dicealgebra.cli.commands:main",
        ]
    },
)
