from setuptools import setup, find_packages

setup(
    name="cargo-get",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "tomlkit>=0.11.0",
        "typer>=0.9.0",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
        ],
    },
    entry_points={
        "console_scripts": [
            "cargo-get=cargo_get.cli.main_cli:main",
        ],
    },
    author="Datadog, Inc.",
    description="Query package info from Cargo.toml in a script-friendly way",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
