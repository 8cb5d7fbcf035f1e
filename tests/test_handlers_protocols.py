"""
Tests for generator and error handler protocols.
"""

import inspect
import json

import pytest

from maybe.handlers.capture import ErrorReturn
from maybe.handlers.decorators import recover_with
from maybe.handlers.interceptor import Maybe
from maybe.handlers.protocols import Generator, RecoveryHandler


class TestProtocols:
    """Tests for runtime checkable protocols."""

    @pytest.mark.unit
    def test_functions_satisfy_protocols(self):
        """Test that plain callables satisfy both protocols."""
        assert isinstance(json.loads, Generator)
        assert isinstance(lambda category, message: None, RecoveryHandler)

    @pytest.mark.unit
    def test_callable_objects_satisfy_protocols(self):
        """Test that objects with __call__ satisfy both protocols."""

        class Fallback:
            def __call__(self, category, message, filename, lineno, context):
                return None

        assert isinstance(Fallback(), RecoveryHandler)
        assert isinstance(Fallback(), Generator)

    @pytest.mark.unit
    def test_non_callables_do_not_satisfy_protocols(self):
        """Test that non-callables are rejected."""
        assert not isinstance("foo", Generator)
        assert not isinstance(123, RecoveryHandler)

    @pytest.mark.unit
    def test_protocols_annotate_public_signatures(self):
        """Test that generator and error handler parameters use the protocols."""
        maybe_params = inspect.signature(Maybe.__init__).parameters

        assert maybe_params["generator"].annotation is Generator
        assert maybe_params["error_handler"].annotation is RecoveryHandler
        assert (
            inspect.signature(ErrorReturn.__init__).parameters["handler"].annotation
            is RecoveryHandler
        )
        assert (
            inspect.signature(recover_with).parameters["error_handler"].annotation
            is RecoveryHandler
        )
