from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="tuilade",
    version="0.1",
    description="Draw the i3/sway layout tree as a Graphviz diagram",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "orjson",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
    package_data={
        "tuilade": ["settings.json"],
    },
    entry_points={
        "console_scripts": ["tuilade=tuilade.run:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],
)
