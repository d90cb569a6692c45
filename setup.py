from setuptools import setup, find_packages

setup(
    name="collapse-simulator",
    version="0.1.0",
    description="Tick-based simulation of congestion collapse in bounded request queues",
    author="adamfilli",
    packages=find_packages(include=["collapsesimulator", "collapsesimulator.*"]),
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "collapse-simulator=collapsesimulator.cli:main",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
