"""Pick a logo (and with it the accent colour) from a free-text OS name."""

from __future__ import annotations

from . import logos
from .logos import Logo

# Evaluated top to bottom, first match wins. Keyword sets overlap
# ("pop" vs. names containing it, "arch" vs. anything with "arch" in it),
# so the order of this list decides which logo a name resolves to.
RULES: tuple[tuple[tuple[str, ...], Logo], ...] = (
    (("arch", "artix", "endeavour"),   logos.ARCH),
    (("ubuntu",),                      logos.UBUNTU),
    (("debian",),                      logos.DEBIAN),
    (("fedora", "nobara"),             logos.FEDORA),
    (("macos", "darwin", "mac os"),    logos.MACOS),
    (("nixos",),                       logos.NIXOS),
    (("gentoo",),                      logos.GENTOO),
    (("suse", "tumbleweed"),           logos.OPENSUSE),
    (("manjaro", "garuda"),            logos.MANJARO),
    (("mint",),                        logos.MINT),
    (("pop",),                         logos.POP),
    (("void",),                        logos.VOID),
    (("alpine",),                      logos.ALPINE),
    (("centos",),                      logos.CENTOS),
    (("red hat", "rhel"),              logos.REDHAT),
    (("rocky", "alma"),                logos.ROCKY),
    (("freebsd",),                     logos.FREEBSD),
    (("openbsd",),                     logos.OPENBSD),
    (("slackware",),                   logos.SLACKWARE),
    (("kali",),                        logos.KALI),
    (("zorin",),                       logos.ZORIN),
    (("elementary",),                  logos.ELEMENTARY),
)

FALLBACK = logos.LINUX


def select_logo(os_name: str) -> Logo:
    """Return the logo of the first rule with a keyword contained in *os_name*.

    Matching is case-insensitive substring containment; names matching no
    rule get the generic Linux logo.
    """
    lowered = os_name.lower()
    for keywords, logo in RULES:
        if any(keyword in lowered for keyword in keywords):
            return logo
    return FALLBACK
