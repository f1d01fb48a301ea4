from gui.utils.geometry import Rect, VIEWPORT_MARGIN, place_popover

VIEWPORT = Rect(0, 0, 800, 600)


def test_centered_below_anchor():
    anchor = Rect(300, 100, 200, 40)
    x, y = place_popover(anchor, (100, 80), VIEWPORT)
    assert x == 350
    assert y == 148


def test_clamped_to_left_margin():
    anchor = Rect(0, 10, 40, 20)
    x, _ = place_popover(anchor, (200, 80), VIEWPORT)
    assert x == VIEWPORT_MARGIN


def test_clamped_to_right_margin():
    anchor = Rect(760, 10, 40, 20)
    x, _ = place_popover(anchor, (200, 80), VIEWPORT)
    assert x == 800 - VIEWPORT_MARGIN - 200


def test_wider_than_viewport_pins_left():
    anchor = Rect(100, 10, 40, 20)
    x, _ = place_popover(anchor, (900, 80), VIEWPORT)
    assert x == VIEWPORT_MARGIN


def test_offset_viewport():
    viewport = Rect(1000, 200, 400, 300)
    anchor = Rect(1010, 250, 30, 20)
    x, y = place_popover(anchor, (120, 50), viewport, gap=4, margin=10)
    assert x == 1010
    assert y == 274
