from setuptools import setup

setup(
    name='bounded_heap',
    author='Martin Privat',
    version='0.1.0',
    packages=['bounded_heap','bounded_heap.tests'],
    license='Creative Commons Attribution-Noncommercial-Share Alike license',
    description='fixed capacity min-heaps over owned or borrowed buffers',
    long_description=open('README.md').read(),
    install_requires=[
        "numpy", 
        "pandas",
        "multiprocessing_logger @ git+https://github.com/ElTinmar/multiprocessing_logger.git@main",
    ],
    extras_require={
        "test": ["pytest"],
    }
)
