# util/types.py
from typing import Dict


# token -> namespace
TokenBindings = Dict[str, str]
