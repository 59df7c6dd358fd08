"""Verify package imports work correctly."""


def test_import_parsecomb() -> None:
    """Test that parsecomb can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import parsecomb

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert parsecomb.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from parsecomb import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exported() -> None:
    """Everything in __all__ resolves."""
    import parsecomb

    for name in parsecomb.__all__:
        assert hasattr(parsecomb, name), name
