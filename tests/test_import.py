"""Verify package imports work correctly."""


def test_import_decomment() -> None:
    """Test that decomment can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import decomment

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert decomment.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from decomment import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    import decomment

    for name in decomment.__all__:
        assert hasattr(decomment, name), name
    assert decomment.strip is decomment.strip_comments
