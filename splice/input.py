"""Frame-based keyboard and mouse button state tracking."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Callable, Optional

from .vector import Vec2


class InputState(IntFlag):
    NOTHING = 0
    PRESS = 1
    HOLD = 2
    RELEASE = 4


class KeyId(IntEnum):
    UNKNOWN = -1
    SPACE = 32
    QUOTE = 39
    COMMA = 44
    SUBTRACT = 45
    PERIOD = 46
    SLASH = 47
    N0 = 48
    N1 = 49
    N2 = 50
    N3 = 51
    N4 = 52
    N5 = 53
    N6 = 54
    N7 = 55
    N8 = 56
    N9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACK_SLASH = 92
    RIGHT_BRACKET = 93
    BACK_QUOTE = 96
    WORLD_1 = 97
    WORLD_2 = 98
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUMPAD_NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    NUMPAD_0 = 320
    NUMPAD_1 = 321
    NUMPAD_2 = 322
    NUMPAD_3 = 323
    NUMPAD_4 = 324
    NUMPAD_5 = 325
    NUMPAD_6 = 326
    NUMPAD_7 = 327
    NUMPAD_8 = 328
    NUMPAD_9 = 329
    NUMPAD_PERIOD = 330
    NUMPAD_DIVIDE = 331
    NUMPAD_MULTIPLY = 332
    NUMPAD_SUBTRACT = 333
    NUMPAD_ADD = 334
    NUMPAD_ENTER = 335
    NUMPAD_EQUAL = 336
    LSHIFT = 340
    LCTRL = 341
    LALT = 342
    LSUPER = 343
    RSHIFT = 344
    RCTRL = 345
    RALT = 346
    RSUPER = 347
    MENU = 348


class MouseButtonId(IntEnum):
    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LAST = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


_ACTION_RELEASE = 0
_ACTION_PRESS = 1


@dataclass(frozen=True)
class _Change:
    input_id: int
    state: InputState
    remove: bool = False


class ButtonInput:
    """Tracks press/hold/release state per button, advanced once per frame.

    A press sets PRESS and HOLD; PRESS clears on the following frame. A release
    sets RELEASE, which clears on the following frame. A press and release seen
    in the same frame report all three flags for that frame.
    """

    def __init__(self) -> None:
        self._states: dict[int, InputState] = {}
        self._changes: deque[_Change] = deque()

    def button_callback(self, button: int, action: int) -> None:
        """Feed a raw event: action 0 is a release, 1 a press; others are ignored."""
        if action == _ACTION_RELEASE:
            self.set_input_state(button, InputState.RELEASE)
        elif action == _ACTION_PRESS:
            self.set_input_state(button, InputState.PRESS)

    def set_input_state(self, input_id: int, state: InputState) -> None:
        """Queue a state change, applied by the next ``process_changes``."""
        self._changes.append(_Change(input_id, InputState(state)))

    def process_changes(self) -> None:
        """Apply the changes queued so far; follow-ups land in the next frame."""
        pressed_this_frame = False
        for _ in range(len(self._changes)):
            change = self._changes.popleft()
            current = self._states.get(change.input_id, InputState.NOTHING)
            if change.remove:
                current = InputState(int(current) & ~int(change.state))
            elif change.state == InputState.PRESS:
                current = InputState.PRESS | InputState.HOLD
                pressed_this_frame = True
                self._changes.append(_Change(change.input_id, InputState.PRESS, True))
            elif change.state == InputState.RELEASE:
                if pressed_this_frame:
                    current |= InputState.RELEASE
                    self._changes.append(_Change(change.input_id, InputState.PRESS, True))
                    self._changes.append(_Change(change.input_id, InputState.HOLD, True))
                else:
                    current = InputState.RELEASE
                self._changes.append(_Change(change.input_id, InputState.RELEASE, True))
            self._states[change.input_id] = current

    def state(self, input_id: int) -> InputState:
        return self._states.get(input_id, InputState.NOTHING)

    def check(self, input_id: int, states: InputState) -> bool:
        """Whether any of ``states`` is set for the button."""
        return bool(self.state(input_id) & states)

    def pressed(self, input_id: int) -> bool:
        return self.check(input_id, InputState.PRESS)

    def holding(self, input_id: int) -> bool:
        return self.check(input_id, InputState.HOLD)

    def released(self, input_id: int) -> bool:
        return self.check(input_id, InputState.RELEASE)


KeyboardInput = ButtonInput


class MouseInput(ButtonInput):
    """Mouse buttons plus cursor position and scroll events."""

    def __init__(self, on_scroll: Optional[Callable[[float, float], None]] = None) -> None:
        super().__init__()
        self.position = Vec2()
        self.on_scroll = on_scroll

    def position_callback(self, x: float, y: float) -> None:
        self.position = Vec2(float(x), float(y))

    def scroll_callback(self, x: float, y: float) -> None:
        if self.on_scroll is not None:
            self.on_scroll(x, y)


class Input:
    """The keyboard and the mouse together."""

    def __init__(self) -> None:
        self.keyboard = KeyboardInput()
        self.mouse = MouseInput()

    def process(self) -> None:
        self.keyboard.process_changes()
        self.mouse.process_changes()