import pytest

from tagpolicy.alphabetical import Alphabetical
from tagpolicy.factory import (
    AlphabeticalPolicy,
    ImagePolicyChoice,
    NumericalPolicy,
    SemVerPolicy,
    policer_from_spec,
)
from tagpolicy.numerical import Numerical
from tagpolicy.policer import Order, PolicyError
from tagpolicy.semver import SemVer


def test_invalid_choice_raises():
    with pytest.raises(PolicyError, match="invalid"):
        policer_from_spec(ImagePolicyChoice())


def test_semver_policy():
    policer = policer_from_spec(ImagePolicyChoice(semver=SemVerPolicy(range="1.0.x")))
    assert isinstance(policer, SemVer)
    assert policer.latest(["1.0.0", "1.0.1", "1.2.0"]) == "1.0.1"


def test_alphabetical_policy_default_order():
    policer = policer_from_spec(ImagePolicyChoice(alphabetical=AlphabeticalPolicy()))
    assert isinstance(policer, Alphabetical)
    assert policer.order is Order.ASC
    assert policer.latest(["xenial", "zesty", "artful"]) == "zesty"


def test_alphabetical_policy_lowercase_order_is_accepted():
    policer = policer_from_spec(
        ImagePolicyChoice(alphabetical=AlphabeticalPolicy(order="desc"))
    )
    assert policer.latest(["xenial", "zesty", "artful"]) == "artful"


def test_numerical_policy():
    policer = policer_from_spec(ImagePolicyChoice(numerical=NumericalPolicy(order="asc")))
    assert isinstance(policer, Numerical)
    assert policer.latest(["3", "10", "-2"]) == "10"


def test_numerical_policy_invalid_order():
    with pytest.raises(PolicyError, match="invalid order"):
        policer_from_spec(ImagePolicyChoice(numerical=NumericalPolicy(order="sideways")))


def test_invalid_semver_range_raises():
    with pytest.raises(PolicyError):
        policer_from_spec(ImagePolicyChoice(semver=SemVerPolicy(range="*-*")))


def test_semver_takes_precedence():
    choice = ImagePolicyChoice(
        semver=SemVerPolicy(range=">=1.0"),
        alphabetical=AlphabeticalPolicy(),
    )
    assert policer_from_spec(choice).latest(["1.0.0", "zzz", "2.0.0"]) == "2.0.0"