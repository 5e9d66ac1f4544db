#!/usr/bin/env python
# encoding: utf-8

from setuptools import setup

setup(
    name='euclid',
    description='Modular multiplicative inverses through the extended Euclidean algorithm.',
    version='0.1',

    license='MIT',

    author='aldur',
    author_email='adrianodl@hotmail.it',

    packages=['euclid'],
    install_requires=[
        'pycryptodome',
        'colorama'
    ],

    scripts=['bin/modinverse'],
    test_suite='euclid.t',

    zip_safe=False,
    include_package_data=True,
)
