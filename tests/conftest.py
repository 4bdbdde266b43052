"""
Pytest configuration and fixtures for brailletables tests.
"""

import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from brailletables.sources import MemoryLocator  # noqa: E402


@pytest.fixture
def memory_locator():
    """Small in-memory tables covering a, b and space."""
    return MemoryLocator({
        "ASCIIToBraille.txt": [
            "01100001,100000\n",
            "01100010,110000\n",
            "00100000,000000\n",
        ],
        "BrailleToASCII.txt": [
            "100000,a\n",
            "110000,b\n",
            "000000, \n",
        ],
        "BrailleToUnicode.txt": [
            "100000,41\n",
            "110000,42\n",
            "000000,ZZ\n",
        ],
    })


@pytest.fixture
def data_dir(tmp_path):
    """A directory holding a one-entry copy of each definition file."""
    (tmp_path / "ASCIIToBraille.txt").write_text("01111000,101101\n", encoding="utf-8")
    (tmp_path / "BrailleToASCII.txt").write_text("101101,X\n", encoding="utf-8")
    (tmp_path / "BrailleToUnicode.txt").write_text("101101,282D\n", encoding="utf-8")
    return tmp_path
