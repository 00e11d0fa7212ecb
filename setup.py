import os

from setuptools import setup, find_packages

HERE = os.path.dirname(os.path.abspath(__file__))


def parse_requirements(requirements):
    with open(os.path.join(HERE, requirements)) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]


requirements = parse_requirements("requirements.txt")
test_requirements = parse_requirements("requirements-test.txt")

setup(
    name='superclouds_client',
    version='0.1.0',
    description='Typed async client for the Superclouds user-management API',
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
    },
    package_dir={"": "src"},
    packages=find_packages("src"),
)
