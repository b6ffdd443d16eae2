"""
EkiRoute - Railway Route Search Engine

This script installs the ekiroute package (in-process route search library).
"""

from setuptools import setup, find_packages


setup(
    name='ekiroute',
    version='1.0.0',
    author='EkiFlow Team',
    description='Multi-route search engine for a nationwide railway network',
    long_description='''
    Dijkstra-based route search over a static railway network dataset.
    Produces a ranked, deduplicated set of alternative routes with transfer
    detection, via-station chaining and per-hop alternative lines.
    ''',
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=[
        'pydantic>=2.5',
        'python-dotenv>=1.0',
        'numpy>=1.24',
        'scipy>=1.10',
    ],
    extras_require={
        'test': [
            'pytest>=7.4',
            'pytest-mock>=3.11',
            'pytest-asyncio>=0.21',
        ],
    },
    zip_safe=False,
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: GIS',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
