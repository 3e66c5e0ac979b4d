# setup.py
from setuptools import setup

setup(
    name='adaptive_arithmetic_coder',
    version='0.1.0',
    description='Adaptive order-0 binary arithmetic coder for byte streams',
    python_requires='>=3.8',
    py_modules=[
        'ac_codec',
        'arithmetic_coding',
        'benchmark_worker',
        'bitReadWrite',
        'decoder',
        'encoder',
        'frequency_model',
        'roundtrip_harness',
        'utils',
    ],
    install_requires=[
        'numpy',
        'pandas',
        'tqdm',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
