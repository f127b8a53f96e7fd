"""
Pytest configuration for kzg_fft tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so the package imports without install
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from kzg_fft.fft_settings import FFTSettings, new_fft_settings  # noqa: E402


@pytest.fixture(scope="session")
def fs16() -> FFTSettings:
    """Settings for max_width = 16."""
    return new_fft_settings(4)


@pytest.fixture(scope="session")
def fs256() -> FFTSettings:
    """Settings for max_width = 256."""
    return new_fft_settings(8)
