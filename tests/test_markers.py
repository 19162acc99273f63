import pytest

from tilde.markers import MarkerSpan, is_eligible_marker, locate_marker, trim_attribute_whitespace


@pytest.mark.parametrize(
    "candidate",
    ["~/home/index.html", "  ~/home/index.html", "\t\n~/a", "~/"],
)
def test_is_eligible_marker_accepts_tilde_slash(candidate):
    assert is_eligible_marker(candidate)


@pytest.mark.parametrize(
    "candidate",
    [
        "/home/index.html",
        "~ /home/index.html",
        "~\\home\\index.html",
        "~\\/home/index.html",
        "~",
        "",
        "/home/index.html ~/second/wontresolve.html",
    ],
)
def test_is_eligible_marker_rejects_everything_else(candidate):
    assert not is_eligible_marker(candidate)


def test_locate_marker_trims_both_ends():
    assert locate_marker("  ~/a  ") == MarkerSpan(2, 5)
    assert locate_marker("~/home/index.html ~/x") == MarkerSpan(0, 21)


def test_locate_marker_only_checks_start():
    assert locate_marker("/a ~/b") is None
    assert locate_marker("~ /a") is None


def test_trim_attribute_whitespace():
    assert trim_attribute_whitespace("\x0c ~/a \r\n") == "~/a"
    # non-breaking space is not attribute whitespace
    assert trim_attribute_whitespace("\xa0~/a") == "\xa0~/a"
