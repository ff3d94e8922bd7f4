from setuptools import setup, find_packages

setup(
    name="mnds",
    version="0.1.0",
    description="Minimal NumPy Data Structures over algebraic structures",
    author="Your Name",
    author_email="your.email@example.com",
    packages=find_packages(exclude=["tests", "examples"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.7",
)
