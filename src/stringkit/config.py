"""
Library defaults.

All tunable policies are centralized here. Values are read at call time,
so callers may adjust them once at startup.
"""

import os
from typing import Any, Dict

# ====================================================================
# LIBRARY CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Casing
    "default_culture": "invariant",  # Culture used when a call passes none (reproducible folding)
    # Codecs
    "encode_errors": "replace",  # Unrepresentable characters become "?" (lossy ASCII)
    "decode_errors": "replace",  # Undecodable bytes become U+FFFD
    # CSV
    "csv_line_separator": os.linesep,  # Platform line break that forces quoting (plus "\n")
    # Pluralization
    "plural_language": "en",  # Culture of the default pluralizer engine
}
