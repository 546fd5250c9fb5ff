import logging

import numpy as np
import pytest

from boxlayout.logging_utils import _safe_repr, debug_log_call

logger = logging.getLogger("boxlayout.tests")


def test_safe_repr_summarizes_arrays_and_sequences():
    assert _safe_repr(np.array([1.0, 2.0])) == "ndarray(shape=(2,), dtype=float64), values=[1.0, 2.0]"
    assert _safe_repr(np.arange(10.0)).endswith("min=0, max=9")
    assert _safe_repr(list(range(8))) == "[0, 1, 2, 3, 4, ... 3 more]"
    assert _safe_repr((1, "a")) == "(1, 'a')"


def test_debug_log_call_traces_entry_and_exit(caplog):
    @debug_log_call(logger, name="double")
    def double(values):
        return values * 2

    with caplog.at_level(logging.DEBUG, logger="boxlayout.tests"):
        double(np.array([1.0, 2.0, 3.0]))

    messages = [record.getMessage() for record in caplog.records]
    assert messages[0].startswith("Entering double (args=[ndarray(shape=(3,)")
    assert messages[1] == "Exiting double -> ndarray(shape=(3,), dtype=float64), values=[2.0, 4.0, 6.0]"


def test_debug_log_call_reraises(caplog):
    @debug_log_call(logger)
    def explode():
        raise KeyError("missing")

    with caplog.at_level(logging.DEBUG, logger="boxlayout.tests"):
        with pytest.raises(KeyError):
            explode()

    assert any("Exception in" in record.getMessage() for record in caplog.records)


def test_debug_log_call_is_idempotent():
    def identity(x):
        return x

    wrapped = debug_log_call(logger)(identity)
    assert debug_log_call(logger)(wrapped) is wrapped

