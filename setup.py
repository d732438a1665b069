from setuptools import find_packages, setup

setup(
    name="itermap",
    version="0.1.0",
    description="Iterators built from a stateful callback and the state it drives",
    author="Meta Platforms, Inc. and affiliates.",
    packages=find_packages(),
    python_requires=">=3.10",
    install_requires=["pydantic>=2"],
    extras_require={"test": ["pytest"]},
)
