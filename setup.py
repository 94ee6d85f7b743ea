# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="foldertree",
    version="1.0.0",
    description="Graphically displays the folder structure of a drive or path",
    author="foldertree contributors",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["foldertree*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'foldertree=foldertree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
