import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="taxonstats",
    version="0.1.0",
    author="Ben Armstrong",
    author_email="synrg@debian.org",
    description="Taxonomic distribution statistics for groups of classified names",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/dronefly-garden/taxonstats",
    install_requires=[
        "pyinaturalist >= 0.17",
    ],
    extras_require={
        "cog": [
            "discord.py >= 2.0",
            "Red-DiscordBot >= 3.5",
        ],
        "docs": [
            "sphinx",
            "sphinx-material",
            "sphinxcontrib-trio",
        ],
        "test": [
            "pytest",
        ],
    },
    packages=setuptools.find_packages(exclude=["docs"]),
    package_data={
        "taxonstats.core.tests": ["data/*"],
        "taxonstatscog": ["info.json"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
