# -*- coding: utf-8 -*-
"""
Package information.
"""

__title__ = "typed_gql"
__description__ = "Declarative, cycle safe schema construction for py_gql."
__version__ = "0.1.0"
__license__ = "MIT"
