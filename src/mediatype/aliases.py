"""Media type splitting, normalisation and known aliases."""


def split_type(media_type: str) -> tuple[str, str | None]:
    """
    Split a media type into category and subtype.

    Only the first "/" separates; anything after it belongs to the subtype.
    The subtype is None when there is no "/".
    """
    category, sep, subtype = media_type.partition("/")
    if not sep:
        return category, None
    return category, subtype


def _strip_prefix(value: str, *prefixes: str) -> str:
    for prefix in prefixes:
        if value.startswith(prefix):
            return value[len(prefix) :]
    return value


def normalise(media_type: str) -> tuple[str, str | None]:
    """Drop "x-" from the category and "x-" or "vnd." from the subtype."""
    category, subtype = split_type(media_type)
    category = _strip_prefix(category, "x-")
    if subtype is not None:
        subtype = _strip_prefix(subtype, "x-", "vnd.")
    return category, subtype


# Known special cases, keyed by normalised type. Not exhaustive.
SPECIAL_CASES: dict[str, list[str]] = {
    "audio/flac": ["application/flac"],
    "application/cdf": ["application/netcdf"],
    "application/dms": ["application/octet-stream"],
    "application/java-source": ["text/plain"],
    "application/java-vm": ["application/octet-stream"],
    "application/lha": ["application/octet-stream"],
    "application/lzh": ["application/octet-stream"],
    "application/mac-binhex40": ["application/binhex40"],
    "application/msdos-program": ["application/octet-stream"],
    "application/ms-pki.seccat": ["application/vnd.ms-pkiseccat"],
    "application/ms-pki.stl": ["application/vnd.ms-pki.stl"],
    "application/ndtcdf": ["application/cdf"],
    "application/netfpx": ["image/vnd.fpx", "image/vnd.net-fpx"],
    "audio/ogg": ["application/ogg"],
    "image/fpx": ["application/vnd.netfpx", "image/vnd.net-fpx"],
    "image/netfpx": ["application/vnd.netfpx", "image/vnd.fpx"],
    "text/c++hdr": ["text/plain"],
    "text/c++src": ["text/plain"],
    "text/chdr": ["text/plain"],
    "text/fortran": ["text/plain"],
}


def _add_aliases(*aliases: str) -> None:
    """Make every type in the group an alias of all the others."""
    group = list(aliases)
    for media_type in group:
        category, subtype = normalise(media_type)
        SPECIAL_CASES[f"{category}/{subtype}"] = group


# Alias groups; every member points at the shared list
_add_aliases("application/mp4", "video/mp4")
_add_aliases("application/json", "text/json")
_add_aliases(
    "application/cals-1840", "image/cals-1840", "image/cals", "image/x-cals", "application/cals"
)
_add_aliases("application/mac-binhex40", "application/binhex40")
_add_aliases("application/atom+xml", "application/atom")
_add_aliases("application/fractals", "image/fif")
_add_aliases("model/vnd.dwg", "image/vnd.dwg", "image/x-dwg", "application/acad")
_add_aliases("image/vnd.dxf", "image/x-dxf", "application/x-dxf", "application/vnd.dxf")
_add_aliases("text/x-c", "text/csrc")
_add_aliases("application/x-helpfile", "application/x-winhlp")
_add_aliases("application/x-tex", "text/x-tex")
_add_aliases("application/rtf", "text/rtf")
_add_aliases("image/jpeg", "image/pipeg", "image/pjpeg")
_add_aliases(
    "text/javascript",
    "text/javascript1.0",
    "text/javascript1.1",
    "text/javascript1.2",
    "text/javascript1.3",
    "text/javascript1.4",
    "text/javascript1.5",
    "text/jscript",
    "text/livescript",
    "text/x-javascript",
    "text/x-ecmascript",
    "application/ecmascript",
    "application/javascript",
)


def aliases_for(media_type: str) -> list[str]:
    """Return the curated aliases of a media type (empty when none are known)."""
    category, subtype = normalise(media_type)
    return list(SPECIAL_CASES.get(f"{category}/{subtype}", []))
