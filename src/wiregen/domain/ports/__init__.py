"""Ports: protocols implemented by infrastructure and application layers."""

from wiregen.domain.ports.file_parser import FileParserPort
from wiregen.domain.ports.scan_cache import ScanCachePort
from wiregen.domain.ports.validator import ValidatorProtocol

__all__ = [
    "FileParserPort",
    "ScanCachePort",
    "ValidatorProtocol",
]
