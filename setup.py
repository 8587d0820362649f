from setuptools import setup, find_packages
import re

# Read version from ptoplan/__init__.py
with open('ptoplan/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='pto-plan',
    version=version,
    packages=find_packages(include=['ptoplan', 'ptoplan.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'pto-plan=ptoplan.cli.__main__:main',
        ],
    },
    author='Personal',
    description='Personal PTO tracking and balance projection tools.',
    python_requires='>=3.10',
)
