# setup.py
from setuptools import setup, find_packages

setup(
    name="file-replacer",
    version="0.1.0",
    description="Overwrite files in a destination tree with same-named files from a source tree",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'file-replacer=file_replacer.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
