import os
from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, "README.rst"), 'r', encoding="utf-8") as f:
    long_description = f.read()

setup(
    name='eqcurve',
    version='1.0.0',
    description='Calculate equalizer correction curves from spectrum '
                'measurements',
    long_description=long_description,
    packages=['eqcurve'],
    license='BSD',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Multimedia :: Sound/Audio :: Analysis',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3 :: Only',
    ],
    keywords='frequency response spectrum equalizer correction',
    entry_points={
        'console_scripts': ['eqcurve=eqcurve.app:main']
    },
    python_requires=">=3.8",
    install_requires=['numba', 'numpy'],
    extras_require={'test': ['pytest']}
)
