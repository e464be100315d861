import pytest

from wiremap.display import (
    BUTTON_PRESS_MASK,
    EXPOSURE_MASK,
    KEY_RELEASE_MASK,
    POINTER_MOTION_MASK,
    Display,
    Event,
    EventType,
)
from wiremap.image import Image

WIN1_SX = 242
WIN1_SY = 242
IM1_SX = 42
IM1_SY = 42
ESCAPE = 0xFF1B


def color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.fixture
def display():
    return Display()


def test_screen_size_defaults(display):
    assert display.screen_size() == (1920, 1080)
    assert Display(800, 600).screen_size() == (800, 600)


def test_no_truecolor_visual_raises():
    with pytest.raises(ValueError):
        Display(depth=8)


def test_color_value_depth_24_unchanged(display):
    assert display.color_value(0xFF99FF) == 0xFF99FF


def test_color_value_depth_16():
    display = Display(depth=16)
    assert display.color_value(0xFF0000) == 0xF800
    assert display.color_value(0x00FF00) == 0x07E0
    assert display.color_value(0x0000FF) == 0x001F


def test_pixel_put_color_map(display):
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    for x, y in [(0, 0), (100, 50), (241, 241)]:
        win.pixel_put(x, y, color_map(x, y, WIN1_SX, WIN1_SY))
    assert win.pixel(0, 0) == color_map(0, 0, WIN1_SX, WIN1_SY)
    assert win.pixel(100, 50) == color_map(100, 50, WIN1_SX, WIN1_SY)
    assert win.pixel(241, 241) == color_map(241, 241, WIN1_SX, WIN1_SY)


def test_pixel_put_off_window_ignored(display):
    win = display.new_window(10, 10, "w")
    win.pixel_put(-1, 3, 0xFFFFFF)
    win.pixel_put(10, 3, 0xFFFFFF)
    assert all(win.pixel(x, 3) == 0 for x in range(10))


def test_pixel_outside_window_raises(display):
    win = display.new_window(10, 10, "w")
    with pytest.raises(IndexError):
        win.pixel(10, 0)


def test_clear_window(display):
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    win.pixel_put(5, 5, 0x123456)
    win.clear()
    assert win.pixel(5, 5) == 0


def test_put_image(display):
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    img = Image(IM1_SX, IM1_SY)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            img.put_pixel(x, y, display.color_value(color_map(x, y, IM1_SX, IM1_SY)))
    win.put_image(img, 20, 20)
    assert win.pixel(20, 20) == color_map(0, 0, IM1_SX, IM1_SY)
    assert win.pixel(61, 61) == color_map(41, 41, IM1_SX, IM1_SY)
    assert win.pixel(19, 19) == 0
    assert win.pixel(62, 20) == 0


def test_put_image_clipped(display):
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    img = Image(IM1_SX, IM1_SY)
    img.put_pixel(21, 21, 0xABCDEF)
    img.put_pixel(0, 0, 0x111111)
    win.put_image(img, 220, 220)
    assert win.pixel(241, 241) == 0xABCDEF
    assert win.pixel(220, 220) == 0x111111
    win.put_image(img, -21, -21)
    assert win.pixel(0, 0) == 0xABCDEF


def test_event_mask(display):
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    win.expose_hook(lambda p: None)
    win.mouse_hook(lambda b, x, y, p: None)
    win.key_hook(lambda k, p: None)
    assert win.event_mask() == EXPOSURE_MASK | BUTTON_PRESS_MASK | KEY_RELEASE_MASK
    win.hook(EventType.MOTION_NOTIFY, POINTER_MOTION_MASK, lambda x, y, p: None)
    assert win.event_mask() & POINTER_MOTION_MASK == POINTER_MOTION_MASK


def test_hook_out_of_range(display):
    win = display.new_window(10, 10, "w")
    with pytest.raises(ValueError):
        win.hook(36, 0, lambda p: None)


def test_first_expose_delivered(display):
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    img = Image(WIN1_SX, WIN1_SY)
    img.put_pixel(3, 3, 0x00FFFF)
    exposed = []

    def expose(param):
        exposed.append(param)
        win.put_image(img, 0, 0)

    win.expose_hook(expose, "p1")
    display.loop()
    assert exposed == ["p1"]
    assert win.pixel(3, 3) == 0x00FFFF


def test_expose_with_count_not_delivered(display):
    win = display.new_window(10, 10, "w")
    display.flush_events()
    calls = []
    win.expose_hook(lambda p: calls.append(p), 1)
    display.post_event(Event(EventType.EXPOSE, win, count=2))
    display.loop()
    assert calls == []


def test_flush_events(display):
    win = display.new_window(10, 10, "w")
    display.post_event(Event(EventType.KEY_RELEASE, win, key=65))
    assert display.flush_events() == 2
    assert display.flush_events() == 0


def test_key_and_mouse_hooks(display):
    win1 = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    display.flush_events()
    log = []
    win1.key_hook(lambda key, p: log.append(("key", key, p)), "k")
    win1.mouse_hook(lambda b, x, y, p: log.append(("mouse", b, x, y, p)), "m")
    display.post_event(Event(EventType.BUTTON_PRESS, win1, button=1, x=10, y=20))
    display.post_event(Event(EventType.KEY_RELEASE, win1, key=97))
    display.loop()
    assert log == [("mouse", 1, 10, 20, "m"), ("key", 97, "k")]


def test_escape_ends_loop(display):
    win1 = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    display.flush_events()
    keys = []

    def key_win1(key, param):
        keys.append(key)
        if key == ESCAPE:
            display.loop_end()

    win1.key_hook(key_win1)
    display.post_event(Event(EventType.KEY_RELEASE, win1, key=65))
    display.post_event(Event(EventType.KEY_RELEASE, win1, key=ESCAPE))
    display.post_event(Event(EventType.KEY_RELEASE, win1, key=66))
    display.loop()
    assert keys == [65, ESCAPE]


def test_escape_destroys_third_window(display):
    win1 = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    win3 = display.new_window(WIN1_SX, WIN1_SY, "Title3")
    display.flush_events()

    def key_win3(key, param):
        if key == ESCAPE:
            display.destroy_window(win3)

    win3.key_hook(key_win3)
    display.post_event(Event(EventType.KEY_RELEASE, win3, key=ESCAPE))
    display.loop()
    assert display.windows == (win1,)


def test_motion_hook(display):
    win3 = display.new_window(WIN1_SX, WIN1_SY, "Title3")
    display.flush_events()
    moves = []
    win3.hook(EventType.MOTION_NOTIFY, POINTER_MOTION_MASK,
              lambda x, y, p: moves.append((x, y)), None)
    display.post_event(Event(EventType.MOTION_NOTIFY, win3, x=5, y=6))
    display.post_event(Event(EventType.MOTION_NOTIFY, win3, x=7, y=8))
    display.loop()
    assert moves == [(5, 6), (7, 8)]
    assert display.mouse_position(win3) == (7, 8)


def test_mouse_recreates_window(display):
    state = {}

    def gere_mouse(button, x, y, param):
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(123, 45, "new win")
        state["win1"].mouse_hook(gere_mouse)

    state["win1"] = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    state["win1"].mouse_hook(gere_mouse)
    win2.mouse_hook(gere_mouse)
    first = state["win1"]
    display.post_event(Event(EventType.BUTTON_PRESS, first, button=1))
    display.loop()
    assert first not in display.windows
    assert state["win1"].title == "new win"
    assert (state["win1"].width, state["win1"].height) == (123, 45)
    assert len(display.windows) == 2


def test_events_for_destroyed_window_dropped(display):
    win = display.new_window(10, 10, "w")
    keep = display.new_window(10, 10, "keep")
    display.flush_events()
    calls = []
    win.key_hook(lambda k, p: calls.append(k))
    display.post_event(Event(EventType.KEY_RELEASE, win, key=1))
    display.destroy_window(win)
    display.loop()
    assert calls == []
    assert display.windows == (keep,)


def test_destroy_unknown_window(display):
    win = display.new_window(10, 10, "w")
    display.destroy_window(win)
    with pytest.raises(ValueError):
        display.destroy_window(win)


def test_delete_request_calls_destroy_hook(display):
    win = display.new_window(10, 10, "w")
    display.flush_events()
    calls = []
    win.hook(EventType.DESTROY_NOTIFY, 0, lambda p: calls.append(p), "bye")
    display.post_event(Event(EventType.CLIENT_MESSAGE, win, delete_request=True))
    display.post_event(Event(EventType.CLIENT_MESSAGE, win))
    display.loop()
    assert calls == ["bye"]


def test_loop_hook_until_end(display):
    win = display.new_window(10, 10, "w")
    display.flush_events()
    ticks = []

    def tick(param):
        ticks.append(param)
        if len(ticks) == 3:
            display.loop_end()

    display.set_loop_hook(tick, "t")
    display.loop()
    assert ticks == ["t", "t", "t"]
    assert display.windows == (win,)
    assert display.flush_events() == 0


def test_loop_stops_when_no_window_left(display):
    win = display.new_window(10, 10, "w")
    display.flush_events()
    ticks = []
    win.key_hook(lambda k, p: display.destroy_window(win))
    display.set_loop_hook(lambda p: ticks.append(p), 0)
    display.post_event(Event(EventType.KEY_RELEASE, win, key=ESCAPE))
    display.loop()
    assert ticks == [0]
    assert display.windows == ()


def test_mouse_move_and_position(display):
    win = display.new_window(100, 100, "w")
    display.mouse_move(win, 40, 50)
    assert display.mouse_position(win) == (40, 50)


def test_mouse_position_unknown_window(display):
    other = Display().new_window(10, 10, "other")
    with pytest.raises(ValueError):
        display.mouse_position(other)