from setuptools import setup
from getoptish.const import VERSION_STR, DESCRIPTION

setup(
    name="getoptish",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["getoptish"],
    install_requires=[
        "graphviz"
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
