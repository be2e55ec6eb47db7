"""
Unit tests for the ${name} template engine.
"""

from unittest.mock import Mock

import pytest

from loadconfig.core.errors import ExpansionError, IntegrationError
from loadconfig.integrations.template import DollarTemplateEngine
from loadconfig.integrations.varserver import InMemoryVarStore
from loadconfig.loader.lines import WorkingBuffer


def expand(text, variables=None, capacity=256):
    engine = DollarTemplateEngine(InMemoryVarStore(variables or {}))
    buf = WorkingBuffer(capacity)
    engine.expand(text, buf)
    return buf.getvalue()


class TestDollarTemplateEngine:
    """Test reference substitution."""

    def test_no_references(self):
        """Test text without references is copied unchanged."""
        assert expand("/sys/a 1") == "/sys/a 1"

    def test_substitutes_every_reference(self):
        """Test all references in a line are replaced."""
        variables = {"/host": "box", "/domain": "example.com"}

        assert expand("/fqdn ${/host}.${/domain}", variables) == "/fqdn box.example.com"

    def test_lone_dollar_is_literal(self):
        """Test '$' without a complete reference is kept."""
        assert expand("/price $5 ${unterminated", {}) == "/price $5 ${unterminated"

    def test_unresolved_reference(self):
        """Test an unknown variable raises ExpansionError."""
        with pytest.raises(ExpansionError, match="/missing"):
            expand("/a ${/missing}")

    def test_empty_reference(self):
        """Test ${} raises ExpansionError."""
        with pytest.raises(ExpansionError):
            expand("/a ${}")

    def test_output_larger_than_buffer(self):
        """Test the buffer's capacity limit surfaces as ExpansionError."""
        with pytest.raises(ExpansionError):
            expand("${/big}", {"/big": "x" * 10}, capacity=5)

    def test_store_failure(self):
        """Test a store transport failure becomes ExpansionError."""
        store = Mock()
        store.get_by_name.side_effect = IntegrationError("down")
        engine = DollarTemplateEngine(store)

        with pytest.raises(ExpansionError, match="down"):
            engine.expand("${/a}", WorkingBuffer(16))
