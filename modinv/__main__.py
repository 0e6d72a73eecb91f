#!/usr/bin/env python
# encoding: utf-8

import modinv.cli

__author__ = "aldur"

modinv.cli.run()
