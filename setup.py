from setuptools import setup, find_packages

setup(
    name='topspin',
    version='0.1.0',
    description='Cycle (orbit) analysis of TopSpin-style permutation puzzles',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    python_requires='>=3.10',
    install_requires=[
        'numpy',
        'pandas',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['topspin=topspin.cli:run'],
    },
)
# pip install -e .[test]
# python -m topspin explore --n 20 --k 4 --sequence 1 3 2
