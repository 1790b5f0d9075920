"""Configuration constants for the subset-sum engine."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# Largest characteristic-vector limit the FFT path may allocate.
# Each operand vector holds 2 * limit float64 values.
MAX_FFT_LIMIT = int(os.environ.get("SUBSETSUM_MAX_FFT_LIMIT", str(1 << 29)))

# Convolution coefficients at reachable sums are integers >= 1, noise sits near 0
FFT_EPS = 0.5

# Print characteristic-vector stats after every inverse FFT
DEBUG_MODE = os.environ.get("SUBSETSUM_DEBUG", "").lower() not in ("", "0", "false")

# Solver used by subset_sums() when no method is given
DEFAULT_METHOD = os.environ.get("SUBSETSUM_METHOD", "fast")
