from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="ray-cli",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Turn natural language into a shell command with an OpenAI-compatible chat API, then run it",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/ray-cli",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Environment :: Console",
        "Topic :: Utilities",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
        "python-dotenv>=0.19.0",
        "requests>=2.25.0",
        "rich>=12.0.0",
        "toml>=0.10.2",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "ray=raycli.main:main",
        ],
    },
)
