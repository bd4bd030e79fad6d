import pytest

from mandelview.settings import Key, Settings


def test_defaults_match_initial_view():
    s = Settings()
    assert s.x0 == -0.5
    assert s.y0 == 0.0
    assert s.scale == 1.0
    assert s.nmax == 256
    assert s.rmax == 10.0
    assert s.rmax2 == 100.0
    assert (s.width, s.height) == (800, 600)
    assert s.mode == 0


def test_escape_requests_close():
    assert Settings().apply_key(Key.ESCAPE) is True


@pytest.mark.parametrize("key", [Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN, Key.ADD, Key.NUM2])
def test_other_keys_do_not_close(key):
    assert Settings().apply_key(key) is False


def test_left_then_right_round_trip():
    s = Settings()
    s.apply_key(Key.LEFT)
    assert s.x0 < -0.5
    s.apply_key(Key.RIGHT)
    assert s.x0 == pytest.approx(-0.5)


def test_up_then_down_round_trip():
    s = Settings()
    s.apply_key(Key.UP)
    assert s.y0 < 0.0
    s.apply_key(Key.DOWN)
    assert s.y0 == pytest.approx(0.0)


def test_shift_pans_ten_times_further():
    plain = Settings()
    fast = Settings()
    plain.apply_key(Key.RIGHT)
    fast.apply_key(Key.RIGHT, shift=True)
    assert (fast.x0 + 0.5) == pytest.approx(10 * (plain.x0 + 0.5))


def test_pan_scales_with_zoom():
    zoomed = Settings(scale=0.5)
    normal = Settings()
    zoomed.apply_key(Key.LEFT)
    normal.apply_key(Key.LEFT)
    assert (zoomed.x0 + 0.5) == pytest.approx(0.5 * (normal.x0 + 0.5))


@pytest.mark.parametrize("zoom_in, zoom_out", [(Key.EQUAL, Key.SUBTRACT), (Key.ADD, Key.HYPHEN)])
@pytest.mark.parametrize("shift", [False, True])
def test_zoom_round_trip(zoom_in, zoom_out, shift):
    s = Settings()
    s.apply_key(zoom_in, shift)
    assert s.scale < 1.0
    s.apply_key(zoom_out, shift)
    assert s.scale == pytest.approx(1.0)


def test_equal_and_add_zoom_alike():
    a, b = Settings(), Settings()
    a.apply_key(Key.EQUAL)
    b.apply_key(Key.ADD)
    assert a.scale == b.scale


def test_shift_zooms_harder():
    plain, fast = Settings(), Settings()
    plain.apply_key(Key.ADD)
    fast.apply_key(Key.ADD, shift=True)
    assert fast.scale < plain.scale


@pytest.mark.parametrize(
    "key, mode", [(Key.NUM0, 0), (Key.NUM1, 1), (Key.NUM2, 2), (Key.NUM3, 3)]
)
def test_number_keys_select_mode(key, mode):
    s = Settings(mode=3 if mode != 3 else 0)
    s.apply_key(key)
    assert s.mode == mode


def test_pixel_step_follows_scale():
    s = Settings()
    before = s.pixel_step()
    s.apply_key(Key.ADD)
    after = s.pixel_step()
    assert after[0] / before[0] == pytest.approx(s.scale)
    assert after[1] / before[1] == pytest.approx(s.scale)