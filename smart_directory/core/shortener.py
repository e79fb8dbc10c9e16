"""Shorten a single directory name to its first user-perceived character."""

import regex

# Extended grapheme clusters, so combining marks stay attached to their base
_GRAPHEME = regex.compile(r"\X")


def graphemes(name: str) -> list[str]:
    """Split a string into extended grapheme clusters."""
    return _GRAPHEME.findall(name)


def shorten_dir(name: str) -> str:
    """Shorten a directory name to one grapheme cluster.

    Hidden directories keep their leading dot plus one more cluster, e.g.
    `.config` becomes `.c` and `Volumes` becomes `V`. A name that is already a
    single cluster is returned unchanged.
    """
    clusters = graphemes(name)
    if not clusters:
        return ""

    if clusters[0] == ".":
        return "".join(clusters[:2])

    return clusters[0]
