"""Tests for domain/model/configuration.py."""

from pathlib import Path

import pytest

from wiregen.domain.model.configuration import (
    DEFAULT_EXCLUDES,
    GeneratorConfig,
    MarkerNames,
    ScanConfig,
)


class TestMarkerNames:
    """Tests for MarkerNames."""

    def test_defaults(self) -> None:
        markers = MarkerNames()
        assert (markers.bind, markers.singleton, markers.inject) == ("bind", "singleton", "Inject")

    def test_fingerprint_changes_with_names(self) -> None:
        assert MarkerNames().fingerprint() != MarkerNames(inject="Provide").fingerprint()

    def test_non_identifier_raises(self) -> None:
        with pytest.raises(ValueError, match="must be an identifier"):
            MarkerNames(bind="my.bind")

    def test_duplicate_names_raise(self) -> None:
        with pytest.raises(ValueError, match="must be distinct"):
            MarkerNames(bind="mark", singleton="mark")


class TestScanConfig:
    """Tests for ScanConfig."""

    def test_defaults(self) -> None:
        config = ScanConfig()
        assert config.extension == ".py"
        assert config.exclude == DEFAULT_EXCLUDES
        assert 1 <= config.max_workers <= 32

    def test_extension_without_dot_raises(self) -> None:
        with pytest.raises(ValueError, match="extension must start with"):
            ScanConfig(extension="py")

    def test_zero_workers_raises(self) -> None:
        with pytest.raises(ValueError, match="max_workers must be >= 1"):
            ScanConfig(max_workers=0)


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_minimal_valid(self) -> None:
        config = GeneratorConfig(source_dirs=(Path("src"),), output=Path("out.py"))
        assert config.imports == ()
        assert config.use_cache
        assert config.cache_file is None
        assert config.include_assertions

    def test_empty_source_dirs_raises(self) -> None:
        with pytest.raises(ValueError, match="source_dirs must not be empty"):
            GeneratorConfig(source_dirs=(), output=Path("out.py"))

    def test_blank_import_raises(self) -> None:
        with pytest.raises(ValueError, match="imports must not contain empty entries"):
            GeneratorConfig(source_dirs=(Path("src"),), output=Path("out.py"), imports=(" ",))
