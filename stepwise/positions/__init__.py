"""Concrete position types."""

from stepwise.positions.index import BufferIndex, Index

__all__ = [
    'Index',
    'BufferIndex',
]
