from __future__ import annotations

import pytest

from argweave.exceptions import ArgumentDefinitionError
from argweave.parser.signature import check_bound_prefix, returns_nothing


def annotated_none(value: str) -> None:
    pass


def annotated_value(value: str) -> int:
    return int(value)


def unannotated(value):
    return value


class Widget:
    def configure(self, spec: str) -> None:
        self.spec = spec


def test_returns_nothing_with_string_annotations():
    assert returns_nothing(annotated_none)
    assert not returns_nothing(annotated_value)
    assert not returns_nothing(unannotated)


def test_returns_nothing_bound_method():
    assert returns_nothing(Widget().configure)
    assert returns_nothing(Widget.configure)


def test_returns_nothing_builtin():
    assert not returns_nothing(int)
    assert not returns_nothing(len)


def test_check_bound_prefix_accepts_partial():
    check_bound_prefix(annotated_value, (), {}, "x")
    check_bound_prefix(Widget.configure, (Widget(),), {}, "x")


def test_check_bound_prefix_rejects_extra():
    with pytest.raises(ArgumentDefinitionError) as excinfo:
        check_bound_prefix(unannotated, (1, 2), {}, "x")
    assert "'x'" in str(excinfo.value)

    with pytest.raises(ArgumentDefinitionError):
        check_bound_prefix(unannotated, (), {"missing": 1}, "x")
