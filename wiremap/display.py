"""An in-memory display: windows with pixel buffers, event hooks and an event loop."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Deque, Dict, List, NamedTuple, Optional, Tuple

from wiremap.colors import get_good_color, rgb_shifts
from wiremap.image import Image


class EventType(IntEnum):
    """Event type numbers as used by the X protocol."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


MAX_EVENT = 36

KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
ENTER_WINDOW_MASK = 1 << 4
LEAVE_WINDOW_MASK = 1 << 5
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
STRUCTURE_NOTIFY_MASK = 1 << 17

_VISUAL_MASKS: Dict[int, Tuple[int, int, int]] = {
    15: (0x7C00, 0x03E0, 0x001F),
    16: (0xF800, 0x07E0, 0x001F),
    24: (0xFF0000, 0x00FF00, 0x0000FF),
    32: (0xFF0000, 0x00FF00, 0x0000FF),
}

_POINTER_EVENTS = (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE, EventType.MOTION_NOTIFY)


@dataclass(frozen=True)
class Event:
    """One input or window event addressed to a window.

    ``key`` is the key symbol of key events, ``button`` the button number of
    button events, ``count`` the number of expose events still to follow, and
    ``delete_request`` marks a client message asking to close the window.
    """

    type: EventType
    window: "Window"
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_request: bool = False


class _Hook(NamedTuple):
    func: Callable[..., Any]
    param: Any
    mask: int


class Window:
    """A window on a :class:`Display`, with its own pixels and event hooks."""

    def __init__(self, display: "Display", width: int, height: int, title: str) -> None:
        self.display = display
        self.width = width
        self.height = height
        self.title = title
        self._pixels = Image(width, height)
        self.hooks: Dict[int, _Hook] = {}

    def hook(self, event_type: int, mask: int, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func`` for events of ``event_type``, selecting them with ``mask``."""
        if not 0 <= int(event_type) < MAX_EVENT:
            raise ValueError(f"event type out of range: {event_type!r}")
        self.hooks[int(event_type)] = _Hook(func, param, mask)

    def key_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(key, param)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, func, param)

    def mouse_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(button, x, y, param)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, func, param)

    def expose_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(param)`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, func, param)

    def event_mask(self) -> int:
        """Return the union of the masks of all installed hooks."""
        mask = 0
        for hook in self.hooks.values():
            mask |= hook.mask
        return mask

    def clear(self) -> None:
        """Fill the window with the background pixel, 0."""
        self._pixels.data[:] = bytes(len(self._pixels.data))

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Draw one pixel of 0xRRGGBB colour; points off the window are ignored."""
        if self._inside(x, y):
            self._pixels.put_pixel(x, y, self.display.color_value(color))

    def put_image(self, image: Image, x: int, y: int) -> None:
        """Copy ``image`` with its top left corner at (x, y), clipped to the window."""
        for iy in range(max(0, -y), min(image.height, self.height - y)):
            for ix in range(max(0, -x), min(image.width, self.width - x)):
                self._pixels.put_pixel(x + ix, y + iy, image.get_pixel(ix, iy))

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value shown at (x, y)."""
        return self._pixels.get_pixel(x, y)


class Display:
    """A screen holding windows, a queue of pending events and a loop to run them."""

    def __init__(self, width: int = 1920, height: int = 1080, depth: int = 24) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        try:
            masks = _VISUAL_MASKS[depth]
        except KeyError:
            raise ValueError(f"no TrueColor visual available at depth {depth}") from None
        self.width = width
        self.height = height
        self.depth = depth
        self._shifts = rgb_shifts(*masks)
        self._windows: List[Window] = []
        self._queue: Deque[Event] = deque()
        self._loop_hook: Optional[Callable[..., Any]] = None
        self._loop_param: Any = None
        self._end_loop = False
        self._pointer: Tuple[int, int] = (0, 0)

    @property
    def windows(self) -> Tuple[Window, ...]:
        """The open windows, newest first."""
        return tuple(self._windows)

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; its first expose event is queued at once."""
        window = Window(self, width, height, title)
        self._windows.insert(0, window)
        self._queue.append(Event(EventType.EXPOSE, window))
        return window

    def _check_window(self, window: Window) -> None:
        if window not in self._windows:
            raise ValueError(f"window {window.title!r} is not open on this display")

    def destroy_window(self, window: Window) -> None:
        """Close ``window``; events still queued for it are dropped."""
        self._check_window(window)
        self._windows.remove(window)

    def set_loop_hook(self, func: Optional[Callable[..., Any]], param: Any = None) -> None:
        """Call ``func(param)`` each time the loop has no pending events."""
        self._loop_hook = func
        self._loop_param = param

    def post_event(self, event: Event) -> None:
        """Queue an event for delivery by the loop."""
        self._queue.append(event)

    def flush_events(self) -> int:
        """Discard all pending events and return how many there were."""
        count = len(self._queue)
        self._queue.clear()
        return count

    def _dispatch(self, event: Event) -> None:
        window = event.window
        if window not in self._windows:
            return
        if event.type in _POINTER_EVENTS:
            self._pointer = (event.x, event.y)
        hooks = window.hooks
        destroy = hooks.get(EventType.DESTROY_NOTIFY)
        if event.type == EventType.CLIENT_MESSAGE and event.delete_request and destroy:
            destroy.func(destroy.param)
        hook = hooks.get(int(event.type))
        if hook is None:
            return
        if event.type in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            hook.func(event.key, hook.param)
        elif event.type in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            hook.func(event.button, event.x, event.y, hook.param)
        elif event.type == EventType.MOTION_NOTIFY:
            hook.func(event.x, event.y, hook.param)
        elif event.type == EventType.EXPOSE:
            if event.count == 0:
                hook.func(hook.param)
        elif event.type >= EventType.ENTER_NOTIFY:
            hook.func(hook.param)

    def loop(self) -> None:
        """Deliver events to hooks until the loop is ended or no window is left.

        Without a loop hook the loop also returns once the queue is empty,
        since nothing could produce another event. Once :meth:`loop_end` has
        been called, the loop returns at once.
        """
        while self._windows and not self._end_loop:
            while not self._end_loop and (self._loop_hook is None or self._queue):
                if not self._queue:
                    return
                self._dispatch(self._queue.popleft())
            if self._loop_hook is not None and not self._end_loop:
                self._loop_hook(self._loop_param)

    def loop_end(self) -> None:
        """Make the running loop return."""
        self._end_loop = True

    def screen_size(self) -> Tuple[int, int]:
        """Return the screen's (width, height)."""
        return self.width, self.height

    def color_value(self, color: int) -> int:
        """Return the pixel value for 0xRRGGBB on this display's visual."""
        return get_good_color(color, self.depth, self._shifts)

    def mouse_move(self, window: Window, x: int, y: int) -> None:
        """Move the pointer to (x, y) relative to ``window``."""
        self._check_window(window)
        self._pointer = (x, y)

    def mouse_position(self, window: Window) -> Tuple[int, int]:
        """Return the pointer position relative to ``window``."""
        self._check_window(window)
        return self._pointer