"""Tests for is_origin_allowed — pure origin admission, no HTTP."""

import pytest

from app.core.cors_policy import is_origin_allowed

ALLOWLIST = {"http://localhost:5173", "https://shop.example.com"}


@pytest.mark.parametrize("origin", sorted(ALLOWLIST))
def test_listed_origin_allowed(origin):
    assert is_origin_allowed(origin, ALLOWLIST)


@pytest.mark.parametrize("origin", [None, ""])
def test_absent_origin_always_allowed(origin):
    assert is_origin_allowed(origin, ALLOWLIST)
    assert is_origin_allowed(origin, set())


@pytest.mark.parametrize("origin", [
    "https://evil.example.com",
    "http://localhost:5174",
    "https://shop.example.com/",
    "HTTP://LOCALHOST:5173",
    "null",
])
def test_unlisted_origin_rejected(origin):
    assert not is_origin_allowed(origin, ALLOWLIST)


def test_empty_allowlist_rejects_every_present_origin():
    assert not is_origin_allowed("http://localhost:5173", [])


def test_accepts_ordered_list_allowlist():
    assert is_origin_allowed("b", ["a", "b"])
