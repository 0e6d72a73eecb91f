#!/usr/bin/env python
# encoding: utf-8

"""Modular multiplicative inverse through the extended Euclidean algorithm."""

__author__ = "aldur"
