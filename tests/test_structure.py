"""Basic test to verify test infrastructure is working."""


def test_project_structure():
    """Verify that the project structure is set up correctly."""
    import geosun

    assert hasattr(geosun, "__version__")
    assert geosun.__version__ == "0.1.0"
