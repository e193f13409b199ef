from setuptools import setup, find_packages


setup(
    name='quatkit',
    version='1.0.0',
    description='Vector, quaternion, and 3x3 matrix value types with rotation representation conversions',
    packages=find_packages(include=['quatkit', 'quatkit.*']),
    python_requires='>=3.11',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
