"""Description of the operating system from its os-release values."""

from __future__ import annotations

from dataclasses import dataclass

from .custom import ModuleError

__all__ = ["OSRelease", "describe_os"]

MODULE_NAME = "OS"


@dataclass(frozen=True)
class OSRelease:
    """Values of an os-release file together with the machine architecture."""

    system_name: str = ""
    name: str = ""
    pretty_name: str = ""
    id: str = ""
    id_like: str = ""
    variant: str = ""
    variant_id: str = ""
    version: str = ""
    version_id: str = ""
    codename: str = ""
    build_id: str = ""
    architecture: str = ""


def _missing(text: str, part: str) -> bool:
    # An empty part counts as present in any non-empty text.
    return not text or part not in text


def describe_os(release: OSRelease) -> str:
    """The default OS line: name, version, variant and architecture.

    Version, variant and architecture are only added when the name does
    not already contain them.
    """
    if not release.name and not release.pretty_name:
        raise ModuleError(MODULE_NAME, "Could not detect OS")

    # When only a pretty name is known the base text stays empty.
    text = release.name

    if release.version_id and _missing(text, release.version_id):
        text += " " + release.version_id
    elif not release.version_id and release.version and _missing(text, release.version):
        text += " " + release.version

    if release.variant and _missing(text, release.variant):
        text += f" ({release.variant})"
    elif not release.variant and release.variant_id and _missing(text, release.variant_id):
        text += f" ({release.variant_id})"

    if _missing(text, release.architecture):
        text += f" [{release.architecture}]"

    return text