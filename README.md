# tagpolicy

Pick the latest tag of a container image from a list of tags according to
a policy, filter and rewrite tags with a regular expression, and check
image repository references. Pure Python, no dependencies.

## Policies

Every policy is a `tagpolicy.policer.Policer` with one method,
`latest(versions)`, which returns one of the given tags or raises
`tagpolicy.policer.PolicyError` (a `ValueError`). An empty list always
raises.

- `tagpolicy.semver.SemVer(range_)`: the highest tag that parses as a
  strict semantic version `MAJOR.MINOR.PATCH[-pre][+meta]` (a leading `v`
  is allowed) and satisfies the range. The tag is returned exactly as
  given. Tags that do not parse are skipped; if none is left in range,
  `PolicyError` is raised.
- `tagpolicy.alphabetical.Alphabetical(order="")`: the last tag in lexical
  order for `"ASC"` (the default, also chosen by `""`), the first for
  `"DESC"`.
- `tagpolicy.numerical.Numerical(order="")`: the tag with the largest
  numeric value for `"ASC"` (the default), the smallest for `"DESC"`.
  Every tag must parse as a number (integers and floats); otherwise
  `PolicyError` is raised.

An order other than `""`, `"ASC"` or `"DESC"` raises `PolicyError`
(see `tagpolicy.policer.Order.parse`).

```python
from tagpolicy.semver import SemVer
from tagpolicy.alphabetical import Alphabetical
from tagpolicy.numerical import Numerical

SemVer("1.0.x").latest(["v1.2.3", "v1.0.0", "v0.1.0"])          # "v1.0.0"
Alphabetical().latest(["xenial", "zesty", "artful"])             # "zesty"
Numerical("DESC").latest(["5", "-8", "25"])                      # "-8"
```

### Semantic version ranges

`tagpolicy.semver.Constraints.parse(text)` understands:

- comparisons `=`, `!=`, `>`, `<`, `>=`, `<=` (also `=>`, `=<`);
- wildcards `1.0.x`, `1.*`, `*` and partial versions such as `1.0`;
- tilde `~1.2` / `~>1.2` (same major and minor) and caret `^1.2` (locks the
  left-most non-zero component);
- hyphen ranges `1.0 - 2.0`;
- several constraints joined by commas or spaces (all must hold), and
  alternatives separated by `||` (any may hold).

A pre-release version only satisfies a constraint that itself names a
pre-release. Malformed ranges, including the empty string, raise
`PolicyError`. `tagpolicy.semver.Version` and `parse_version(tag)` expose
the parsed, comparable version.

## Building a policy from a specification

```python
from tagpolicy.factory import ImagePolicyChoice, SemVerPolicy, policer_from_spec

policer = policer_from_spec(ImagePolicyChoice(semver=SemVerPolicy(range="^1.0")))
policer.latest(["1.0.0", "1.4.2", "2.0.0"])                     # "1.4.2"
```

`ImagePolicyChoice` holds optional `semver`, `alphabetical`
(`AlphabeticalPolicy`) and `numerical` (`NumericalPolicy`) entries; the
first one set, in that order, is used. The order of the alphabetical and
numerical entries is case-insensitive. A choice with nothing set raises
`PolicyError`.

## Filtering tags

`tagpolicy.filter.RegexFilter(pattern, replace="")` keeps the tags in which
the pattern is found and can rewrite them with a replacement template
(`$1`, `$name`, `${name}`, `$$`). The original tag stays reachable. An
invalid pattern raises `PolicyError`.

```python
from tagpolicy.filter import RegexFilter

f = RegexFilter(r"ver(\d+)", "$1")
f.apply(["ver1", "ver2", "rel1"])
sorted(f.items())          # ["1", "2"]
f.original_tag("2")        # "ver2"
f.original_tag("9")        # ""
```

## Image references

```python
from tagpolicy.reference import parse_image_reference

ref = parse_image_reference("example.com:9999/foo/bar", insecure=False)
str(ref)                   # "example.com:9999/foo/bar"
ref.registry_str()         # "example.com:9999"
ref.scheme()               # "https"
```

A URL scheme (`https://...`), a tag (`...:tag`) or a reference that does
not parse raises `tagpolicy.reference.ReferenceError`. With
`insecure=True` the registry scheme is `http`; it is also `http` for
`localhost` and loopback or private IP addresses. A reference without a
registry uses `index.docker.io`.

## What this package does not do

It works only on lists of tags and reference strings you give it. It does
not contact registries, list tags, handle credentials or certificates,
store scan results, or run as a service; there is no command-line program.

## Tests

```
pip install -e ".[test]"
pytest
```