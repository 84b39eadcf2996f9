from setuptools import setup, find_packages

setup(
    name="uidump-parser",
    version="1.0.0",
    packages=find_packages(include=["uidump_parser", "uidump_parser.*"]),
    install_requires=[
        "lxml>=4.9",
        "pyyaml>=5.4",
        "jsonschema>=4.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    package_data={
        "uidump_parser": ["schemas/*.json"],
    },
    entry_points={
        "console_scripts": [
            "uidump-parser=uidump_parser.cli:main",
        ],
    },
)
