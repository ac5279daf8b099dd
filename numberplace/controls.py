"""
Input handling for the pygame front end: key mapping and confirmation of
destructive buttons.
"""
import logging

import pygame

logger = logging.getLogger(__name__)

# Standard number row + numpad
DIGIT_KEYS = {
    pygame.K_1: 1, pygame.K_2: 2, pygame.K_3: 3, pygame.K_4: 4, pygame.K_5: 5,
    pygame.K_6: 6, pygame.K_7: 7, pygame.K_8: 8, pygame.K_9: 9,
    pygame.K_KP1: 1, pygame.K_KP2: 2, pygame.K_KP3: 3, pygame.K_KP4: 4, pygame.K_KP5: 5,
    pygame.K_KP6: 6, pygame.K_KP7: 7, pygame.K_KP8: 8, pygame.K_KP9: 9,
}

ERASE_KEYS = (pygame.K_BACKSPACE, pygame.K_DELETE)

ARROW_KEYS = {
    pygame.K_UP: (-1, 0),
    pygame.K_DOWN: (1, 0),
    pygame.K_LEFT: (0, -1),
    pygame.K_RIGHT: (0, 1),
}


class KeyboardController:
    """
    Translates KEYDOWN events into session operations.

    Holds a callable returning the current session rather than the session
    itself, because starting a new game replaces the session object.
    """

    def __init__(self, get_session):
        self.get_session = get_session

    def handle_event(self, event):
        """Returns True if the event was consumed."""
        if event.type != pygame.KEYDOWN:
            return False
        return self.handle_key(event.key)

    def handle_key(self, key):
        session = self.get_session()
        # Keyboard input is ignored once the puzzle is solved
        if session.is_complete:
            return False

        digit = DIGIT_KEYS.get(key)
        if digit is not None:
            session.place_digit(digit)
            return True

        if key in ERASE_KEYS:
            session.erase()
            return True

        if key in ARROW_KEYS:
            d_row, d_col = ARROW_KEYS[key]
            session.move_selection(d_row, d_col)
            return True

        # pygame reports 'm' for both cases; shift is a modifier
        if key == pygame.K_m:
            session.toggle_memo_mode()
            logger.debug("Memo mode %s", "on" if session.memo_mode else "off")
            return True

        return False


class ConfirmGuard:
    """
    Two-step confirmation for a button that throws away progress. The first
    request arms the guard and the second one goes through; any other input
    in between disarms it.
    """

    def __init__(self):
        self.armed = False

    def request(self, needed=True):
        """Returns True when the guarded action should run now."""
        if not needed or self.armed:
            self.armed = False
            return True
        self.armed = True
        return False

    def cancel(self):
        self.armed = False
