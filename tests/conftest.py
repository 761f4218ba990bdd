import pytest

from biglisp import parse, evaluate_expression


@pytest.fixture
def run():
    """Parse and evaluate one expression with optional host bindings."""
    def _run(source, bindings=None, **kwargs):
        return evaluate_expression(parse(source), bindings, **kwargs)
    return _run
