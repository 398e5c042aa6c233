# setup.py
from setuptools import setup, find_packages

setup(
    name="fsvisitor",
    version="1.0.0",
    description="Modelo compuesto de ficheros y directorios con exportadores basados en Visitor",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'fsvisitor=fsvisitor.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
