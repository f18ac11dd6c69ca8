from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "pydantic>=2.0",
    "typer>=0.9.0",
    "jinja2>=3.1.0",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="verse-scansion",
    version="0.3.0",
    packages=find_packages(include=["verse", "verse.*"]),
    package_data={"verse.rendering": ["templates/*.j2"]},
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": ["verse=verse.cli.main:run"],
    },
    python_requires=">=3.9",
    description="Automated metrical scansion of Latin verse",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
        "Operating System :: OS Independent",
    ],
)
