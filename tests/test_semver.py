import pytest

from tagpolicy.policer import PolicyError
from tagpolicy.semver import Constraints, SemVer, Version, parse_version


@pytest.mark.parametrize("r", ["1.0.x", "^1.0", "=1.0.0", "~1.0", ">=1.0", ">0,<2.0"])
def test_new_semver_valid(r):
    assert SemVer(r).range == r


@pytest.mark.parametrize("r", ["1.0.0p", "1x", "x1", "-1", "a", ""])
def test_new_semver_invalid(r):
    with pytest.raises(PolicyError):
        SemVer(r)


@pytest.mark.parametrize(
    "rng, versions, expected",
    [
        ("1.0.x", ["1.0.0", "1.0.0.1", "1.0.0p", "1.0.1", "1.2.0", "0.1.0"], "1.0.1"),
        ("1.0.x", ["v1.2.3", "v1.0.0", "v0.1.0"], "v1.0.0"),
    ],
)
def test_latest(rng, versions, expected):
    assert SemVer(rng).latest(versions) == expected


@pytest.mark.parametrize(
    "versions", [["b1.2.3", "b1.0.0", "b0.1.0"], [], ["1.2.0"]]
)
def test_latest_errors(versions):
    with pytest.raises(PolicyError):
        SemVer("1.0.x").latest(versions)


def test_parse_version_keeps_original():
    v = parse_version("v1.2.3-rc.1+build")
    assert (v.major, v.minor, v.patch, v.prerelease, v.metadata) == (1, 2, 3, "rc.1", "build")
    assert v.original == "v1.2.3-rc.1+build"


@pytest.mark.parametrize("text", ["1.0", "01.0.0", "1.0.0.1", "1.0.0p"])
def test_parse_version_strict(text):
    with pytest.raises(PolicyError):
        Version.parse(text)


def test_prerelease_ordering():
    assert Version.parse("1.0.0-alpha") < Version.parse("1.0.0-alpha.1")
    assert Version.parse("1.0.0-alpha.2") < Version.parse("1.0.0-beta")
    assert Version.parse("1.0.0-rc.1") < Version.parse("1.0.0")


def test_constraints_check():
    c = Constraints.parse(">=1.2, <2.0 || 3.x")
    assert c.check(Version.parse("1.5.0"))
    assert not c.check(Version.parse("2.1.0"))
    assert c.check(Version.parse("3.4.5"))
    assert not c.check(Version.parse("3.0.0-rc.1"))


def test_caret_and_tilde():
    assert Constraints.parse("^1.0").check(Version.parse("1.9.0"))
    assert not Constraints.parse("^1.0").check(Version.parse("2.0.0"))
    assert not Constraints.parse("~1.0").check(Version.parse("1.1.0"))