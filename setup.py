from setuptools import setup, find_packages

setup(
    name="pino-argparse",
    version="0.1.0",
    description="Declarative command-line argument parsing and dispatch.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "python-json-logger>=3.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "toml>=0.10",
        "python-dateutil>=2.8",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["pino-argparse=pino_argparse.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
