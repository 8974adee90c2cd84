"""WebAssembly module statistics package."""

from .api import (  # noqa: F401
    collect_stats,
    dump_stats,
    get_instruction_stats,
    get_stats,
    infer_language,
    stats_from_file,
)
from .index_space import IndexSpaceError  # noqa: F401
from .reader import DecodeError  # noqa: F401
from .stats_types import Language, Stats  # noqa: F401
