"""Icon id and asset filename parsing."""

from domain.constants import SVG_SUFFIX


def parse_icon_id(icon_id: str) -> tuple[str | None, str | None]:
    """
    Split `<vendor>.<slug>` into (vendor, slug).

    The vendor is the first dot-delimited token; the slug is everything after the
    first dot and may itself contain dots. Returns (None, None) when either part
    would be empty.

    Examples:
        >>> parse_icon_id("aws.ec2")
        ('aws', 'ec2')
        >>> parse_icon_id("gcp.cloud.run")
        ('gcp', 'cloud.run')
        >>> parse_icon_id("aws")
        (None, None)
    """
    vendor, sep, slug = icon_id.partition(".")
    if not sep or not vendor or not slug:
        return None, None
    return vendor, slug


def make_icon_id(vendor: str, slug: str) -> str:
    return f"{vendor}.{slug}"


def parse_svg_filename(file_name: str) -> tuple[str | None, str | None]:
    """
    Split `<slug>.<variant>.svg` into (slug, variant).

    The last dot token is the variant, the rest is the slug. A base name with
    fewer than two tokens (or an empty slug/variant) yields (None, None).

    Examples:
        >>> parse_svg_filename("ec2.mono.svg")
        ('ec2', 'mono')
        >>> parse_svg_filename("cloud.run.color.svg")
        ('cloud.run', 'color')
        >>> parse_svg_filename("ec2.svg")
        (None, None)
    """
    base = file_name.removesuffix(SVG_SUFFIX)
    slug, sep, variant = base.rpartition(".")
    if not sep or not slug or not variant:
        return None, None
    return slug, variant
