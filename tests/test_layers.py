from __future__ import annotations

from bgdrift.layers import image_sources, normalize_position, normalize_size, parse_background


def test_no_images_means_no_layers() -> None:
    assert parse_background("none") is None
    assert parse_background("") is None
    assert parse_background("url()") is None


def test_short_lists_are_padded_with_defaults() -> None:
    bg = parse_background(
        "url(a.png), url('b.png'), url(\"c.png\")",
        "50% auto",
        "10px 20px",
    )
    assert bg.images == ["a.png", "b.png", "c.png"]
    assert bg.sizes == ["50% auto", "auto auto", "auto auto"]
    assert bg.positions == ["10px 20px", "0px 0px", "0px 0px"]
    assert len(bg) == 3


def test_blank_entries_get_defaults() -> None:
    bg = parse_background("url(a.png), url(b.png)", "  , 20px", " ,  ")
    assert bg.sizes == ["auto auto", "20px auto"]
    assert bg.positions == ["0px 0px", "0px 0px"]


def test_url_scan_is_tolerant() -> None:
    srcs = image_sources('linear-gradient(red, blue), URL( "x.png" ), url( y.png )')
    assert srcs == ["x.png", "y.png"]


def test_data_uri_keeps_its_comma() -> None:
    assert image_sources('url("data:image/png;base64,AAAA")') == ["data:image/png;base64,AAAA"]


def test_single_size_token_gets_auto() -> None:
    assert normalize_size("100px") == "100px auto"


def test_position_keywords_are_put_in_x_y_order() -> None:
    assert normalize_position("top left") == "left top"
    assert normalize_position("bottom right") == "right bottom"
    assert normalize_position("top center") == "center top"
    assert normalize_position("center top") == "center top"
    assert normalize_position("left top") == "left top"
    assert normalize_position("center") == "center 0px"
