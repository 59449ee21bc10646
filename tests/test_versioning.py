import pytest
from hypothesis import given
from hypothesis import strategies as st

from idkit.versioning import IDK_VERSION, RANGES_VERSION, Version, version_number


def test_library_versions_are_zero():
    assert str(IDK_VERSION) == "0.0.0"
    assert RANGES_VERSION.number() == 0


def test_packed_number():
    assert version_number(1, 2, 3) == 100203


def test_parse_fields():
    version = Version.parse("4.5.6")
    assert (version.major, version.minor, version.patch) == (4, 5, 6)


@pytest.mark.parametrize("text", ["", "1.2", "1.2.3.4", "a.b.c", "1.-2.3", "1..3"])
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        Version.parse(text)


def test_negative_component_rejected():
    with pytest.raises(ValueError):
        Version(1, -1, 0)


parts = st.integers(min_value=0, max_value=99)


@given(st.integers(min_value=0, max_value=10_000), parts, parts)
def test_string_round_trip(major, minor, patch):
    version = Version(major, minor, patch)
    assert Version.parse(str(version)) == version


@given(st.integers(min_value=0, max_value=10_000), parts, parts)
def test_number_matches_function(major, minor, patch):
    assert Version(major, minor, patch).number() == version_number(major, minor, patch)


@given(
    st.tuples(st.integers(min_value=0, max_value=500), parts, parts),
    st.tuples(st.integers(min_value=0, max_value=500), parts, parts),
)
def test_ordering_agrees_with_number(a, b):
    va, vb = Version(*a), Version(*b)
    assert (va < vb) == (va.number() < vb.number())


@given(st.integers(min_value=0, max_value=10_000), parts, parts)
def test_number_decomposes(major, minor, patch):
    number = version_number(major, minor, patch)
    assert divmod(number, 100000) == (major, minor * 100 + patch)