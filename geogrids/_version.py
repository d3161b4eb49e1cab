"""
The installed version of geogrids
"""

__all__ = ['__version__']

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

try:
    __version__ = version('geogrids')
except PackageNotFoundError:
    # Running from a source checkout; setup.py builds from the same file
    __version__ = (Path(__file__).resolve().parents[1] / 'VERSION').read_text(encoding='utf-8').strip()
