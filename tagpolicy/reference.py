"""Parsing of container image repository references."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass

DEFAULT_REGISTRY = "index.docker.io"

_REPOSITORY_RE = re.compile(r"[a-z0-9_./-]{2,255}")
_TAG_RE = re.compile(r"[A-Za-z0-9_.-]{1,128}")
_REGISTRY_RE = re.compile(r"(?:[A-Za-z0-9.-]+|\[[0-9A-Fa-f:.]+\])(?::\d+)?")
_DIGEST_RE = re.compile(r"sha256:[0-9a-f]{64}")


class ReferenceError(ValueError):  # noqa: A001
    """Raised when an image reference cannot be parsed or is not acceptable."""


@dataclass(frozen=True)
class ImageReference:
    """A parsed image reference: registry, repository and tag or digest."""

    registry: str
    repository: str
    tag: str = ""
    digest: str = ""
    original: str = ""
    insecure: bool = False

    def registry_str(self) -> str:
        """Return the registry host, falling back to the default registry."""
        return self.registry or DEFAULT_REGISTRY

    def scheme(self) -> str:
        """Return the URL scheme used to talk to the registry."""
        host = self.registry_str()
        if self.insecure or host == "localhost" or host.startswith("localhost:"):
            return "http"
        if host.startswith("["):
            host = host[1:].split("]", 1)[0]
        elif host.count(":") == 1:
            host = host.rsplit(":", 1)[0]
        try:
            ip = ipaddress.ip_address(host)
        except ValueError:
            return "https"
        return "http" if ip.is_loopback or ip.is_private else "https"

    def __str__(self) -> str:
        return self.original


def _split_repository(text: str) -> tuple[str, str]:
    head, sep, rest = text.partition("/")
    registry, repository = "", text
    if sep and ("." in head or ":" in head or head == "localhost"):
        registry, repository = head, rest
    if not _REPOSITORY_RE.fullmatch(repository):
        raise ReferenceError(f"invalid repository: {repository}")
    if registry == "docker.io":
        registry = DEFAULT_REGISTRY
    if registry and not _REGISTRY_RE.fullmatch(registry):
        raise ReferenceError(f"registries must be valid RFC 3986 URI authorities: {registry}")
    if registry in ("", DEFAULT_REGISTRY) and "/" not in repository:
        repository = f"library/{repository}"
    return registry, repository


def _strip_tag(text: str) -> tuple[str, str]:
    head, sep, last = text.rpartition(":")
    return (head, last) if sep and "/" not in last else (text, "")


def _parse(text: str, insecure: bool) -> ImageReference:
    base, at, digest = text.partition("@")
    if at:
        if not _DIGEST_RE.fullmatch(digest):
            raise ReferenceError(f"invalid digest: {digest}")
        base = _strip_tag(base)[0]
        tag = ""
    else:
        base, tag = _strip_tag(text)
        if tag and not _TAG_RE.fullmatch(tag):
            raise ReferenceError(f"invalid tag: {tag}")
        tag = tag or "latest"
    registry, repository = _split_repository(base)
    return ImageReference(registry, repository, tag, digest, text, insecure)


def parse_image_reference(url: str, insecure: bool = False) -> ImageReference:
    """Parse ``url`` as an image repository reference without scheme or tag."""
    parts = url.split("://")
    if len(parts) > 1:
        raise ReferenceError(
            f"image '{url}' should not include URL scheme; remove '{parts[0]}://'"
        )
    try:
        ref = _parse(url, insecure)
    except ReferenceError:
        raise ReferenceError(f"could not parse reference: {url}") from None
    parts = url.removeprefix(ref.registry_str()).split(":")
    if len(parts) > 1:
        raise ReferenceError(f"image '{url}' should not include a tag; remove ':{parts[1]}'")
    return ref