#!/usr/bin/env python
# encoding: utf-8

from setuptools import setup

setup(
    name='ModInv',
    description='Modular multiplicative inverse through the extended Euclidean algorithm.',
    version='0.1',

    license='MIT',

    author='aldur',

    packages=['modinv', 'modinv.t'],
    install_requires=[
        'colorama'
    ],
    extras_require={
        'test': [
            'pycryptodome'
        ]
    },

    scripts=['bin/modinv'],

    zip_safe=False,
    include_package_data=True,
)
