from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "pydantic>=2.0",
    "typer>=0.9.0",
    "jinja2>=3.1.0",
    "tqdm>=4.65.0",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="folkets",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"folkets": ["rendering/templates/*.j2"]},
    include_package_data=True,
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "folkets=folkets.cli.main:run",
        ],
    },
    python_requires=">=3.9",
    description="Viewer and record parser for the Folkets Swedish/English dictionary",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
