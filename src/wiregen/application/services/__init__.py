"""Application services.

generate_wiring() is the main entry point running the whole pipeline;
scan_directories() is the scanning step on its own.
"""

from wiregen.application.services.scanner import find_source_files, scan_directories
from wiregen.application.services.wiring import GenerationReport, generate_wiring, open_cache

__all__ = [
    "GenerationReport",
    "find_source_files",
    "generate_wiring",
    "open_cache",
    "scan_directories",
]
