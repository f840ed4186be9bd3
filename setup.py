# setup.py
from setuptools import setup, find_packages

setup(
    name="mtstream",
    version="0.1.0",
    packages=find_packages(include=['mtstream', 'mtstream.*']),
    install_requires=[
        "construct>=2.10",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="Decoder for authoring-tool project data streams",
    keywords="mtropolis, unbundle, binary, decoder",
    entry_points={
        'console_scripts': [
            'mtstream-dump=mtstream.cli:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
