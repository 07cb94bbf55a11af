# -*- coding: utf-8 -*-
"""
Url adreslerini, bir temel url'e göre göreceli yollara çevirir.
-----------------------------------------------------------------------
Turns urls into paths relative to a base url.
"""
import logging

from .urls import makeRelative, splitUrl
from .urls import InvalidInputError, DomainMismatchError
from .paths import PathError

__all__ = [
    'makeRelative',
    'splitUrl',
    'InvalidInputError',
    'DomainMismatchError',
    'PathError',
]

logging.getLogger("relurl").addHandler(logging.NullHandler())
