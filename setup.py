# -*- coding: utf-8 -*-
import os.path

from setuptools import setup, find_packages

root = os.path.dirname(__file__)

with open(os.path.join(root, 'README.rst')) as f:
    readme = f.read()


setup(
    name="matchrace",
    use_scm_version={'fallback_version': '0.1.0'},
    description="Maximum bipartite matching with naive greedy, Ford-Fulkerson and Hopcroft-Karp strategies.",
    long_description=readme,
    long_description_content_type='text/x-rst',
    license='MIT',
    zip_safe=True,
    packages=find_packages(exclude=('tests', )),
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    setup_requires=[
        'setuptools_scm >= 1.7.0',
    ],
    install_requires=[
        'hopcroftkarp>=1.2,<2.0',
        'tabulate',
        'colorlog',
    ],
    extras_require={
        'tests': ['pytest', 'hypothesis'],
    },
    entry_points={
        'console_scripts': ['matchrace = matchrace.cli:main'],
    },
)
