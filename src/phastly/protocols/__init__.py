# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for phastly components.

Available protocols:
- DispatcherProtocol: Interface for objects that perform API requests
"""

from ..types.request import RequestDescriptor
from .dispatcher import DispatcherProtocol

__all__ = [
    "DispatcherProtocol",
    "RequestDescriptor",
]
