"""I/O utilities for lathecad."""

from .dxf import read_profile_edges
from .profile_json import dump_edges, load_edges
from .stl import write_stl

__all__ = ['read_profile_edges', 'load_edges', 'dump_edges', 'write_stl']
