from domain.identifiers import make_icon_id, parse_icon_id, parse_svg_filename


def test_parse_icon_id_splits_on_first_dot_only() -> None:
    assert parse_icon_id("aws.ec2") == ("aws", "ec2")
    assert parse_icon_id("gcp.cloud.run") == ("gcp", "cloud.run")


def test_parse_icon_id_rejects_missing_parts() -> None:
    assert parse_icon_id("aws") == (None, None)
    assert parse_icon_id(".ec2") == (None, None)
    assert parse_icon_id("aws.") == (None, None)


def test_parse_svg_filename_takes_last_token_as_variant() -> None:
    assert parse_svg_filename("ec2.mono.svg") == ("ec2", "mono")
    assert parse_svg_filename("cloud.run.color.svg") == ("cloud.run", "color")


def test_parse_svg_filename_without_variant() -> None:
    assert parse_svg_filename("ec2.svg") == (None, None)
    assert parse_svg_filename("ec2..svg") == (None, None)


def test_make_icon_id_round_trips_with_parse() -> None:
    assert parse_icon_id(make_icon_id("gcp", "cloud.run")) == ("gcp", "cloud.run")
