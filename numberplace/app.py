"""
pygame front end. Owns exactly one GameSession at a time and drives it from
mouse and keyboard input.
"""
import logging

import pygame

from . import config
from .board import BLANK, BOX_SIZE, DIGITS, GRID_SIZE
from .controls import ConfirmGuard, KeyboardController
from .session import STATUS_CORRECT, STATUS_GIVEN, STATUS_WRONG, new_session

logger = logging.getLogger(__name__)

DIFFICULTY_LABELS = (('easy', "Easy"), ('medium', "Medium"), ('hard', "Hard"))


class NumberPlaceApp:
    def __init__(self, generator, difficulty=config.DEFAULT_DIFFICULTY):
        pygame.init()
        self.screen = pygame.display.set_mode((config.WINDOW_WIDTH, config.WINDOW_HEIGHT))
        pygame.display.set_caption(config.WINDOW_TITLE)

        self.colors = config.COLORS
        self.font_title = pygame.font.Font(None, 44)
        self.font_large = pygame.font.Font(None, 40)
        self.font_medium = pygame.font.Font(None, 30)
        self.font_small = pygame.font.Font(None, 22)
        self.font_memo = pygame.font.Font(None, 16)

        self.generator = generator
        self.session = new_session(difficulty, generator)
        self.keyboard = KeyboardController(lambda: self.session)

        self.new_game_guard = ConfirmGuard()

        # (label, rect, callback) triples rebuilt every frame
        self.click_targets = []

    def start_new_game(self, difficulty=None):
        """Replaces the current session with a freshly generated one."""
        self.session = self.session.restart(difficulty)

    def request_new_game(self):
        """New Game button: a game in progress needs a second click to be dropped."""
        if self.new_game_guard.request(not self.session.is_complete):
            self.start_new_game()

    # -------------------------------------------------------------------------
    # Drawing helpers
    # -------------------------------------------------------------------------
    def draw_rounded_rect(self, color, rect, radius=8):
        pygame.draw.rect(self.screen, color, rect, border_radius=radius)

    def draw_button(self, text, rect, color, text_color, action, enabled=True):
        """Draws a button and registers it as a click target when enabled."""
        rect = pygame.Rect(rect)
        self.draw_rounded_rect(color, rect)
        surface = self.font_medium.render(text, True, text_color)
        self.screen.blit(surface, surface.get_rect(center=rect.center))
        if enabled:
            self.click_targets.append((text, rect, action))
        return rect

    def cell_rect(self, row, col):
        return pygame.Rect(config.GRID_X + col * config.CELL_PIXELS,
                           config.GRID_Y + row * config.CELL_PIXELS,
                           config.CELL_PIXELS, config.CELL_PIXELS)

    # -------------------------------------------------------------------------
    # Screens
    # -------------------------------------------------------------------------
    def draw(self, snapshot):
        self.click_targets = []
        self.screen.fill(self.colors['background'])
        self.draw_header(snapshot)
        self.draw_cells(snapshot)
        self.draw_grid_lines()
        self.draw_controls(snapshot)
        if snapshot.is_complete:
            self.draw_victory()

    def draw_header(self, snapshot):
        title = self.font_title.render(config.WINDOW_TITLE, True, self.colors['text'])
        self.screen.blit(title, (config.GRID_X, 25))

        color = self.colors['text_muted']
        if snapshot.mistake_count > config.MISTAKE_ALERT_THRESHOLD:
            color = self.colors['wrong']
        mistakes = self.font_small.render(f"Mistakes: {snapshot.mistake_count}", True, color)
        self.screen.blit(mistakes, mistakes.get_rect(
            topright=(config.GRID_X + config.GRID_PIXELS, 35)))

    def draw_cells(self, snapshot):
        for row in snapshot.cells:
            for cell in row:
                rect = self.cell_rect(cell.row, cell.col)

                # Background highlight, strongest first
                if cell.selected:
                    background = self.colors['selected']
                elif cell.same_digit:
                    background = self.colors['same_digit']
                elif cell.related and cell.status not in (STATUS_CORRECT, STATUS_WRONG):
                    background = self.colors['related']
                else:
                    background = self.colors['grid_bg']
                pygame.draw.rect(self.screen, background, rect)

                if cell.value != BLANK:
                    if cell.selected:
                        color = (255, 255, 255)
                    elif cell.status == STATUS_WRONG:
                        color = self.colors['wrong']
                    elif cell.status == STATUS_CORRECT:
                        color = self.colors['correct']
                    else:
                        color = self.colors['text']
                    font = self.font_large if cell.status != STATUS_GIVEN else self.font_title
                    text = font.render(str(cell.value), True, color)
                    self.screen.blit(text, text.get_rect(center=rect.center))
                elif cell.memos:
                    self.draw_memos(rect, cell.memos)

    def draw_memos(self, rect, memos):
        """Memos sit in a 3x3 mini-grid: 1 top-left, 9 bottom-right."""
        step = config.CELL_PIXELS // 3
        for digit in memos:
            index = digit - 1
            center = (rect.x + (index % 3) * step + step // 2,
                      rect.y + (index // 3) * step + step // 2)
            text = self.font_memo.render(str(digit), True, self.colors['text_muted'])
            self.screen.blit(text, text.get_rect(center=center))

    def draw_grid_lines(self):
        for i in range(GRID_SIZE + 1):
            thick = i % BOX_SIZE == 0
            thickness = 3 if thick else 1
            color = self.colors['line_thick'] if thick else self.colors['line_thin']
            offset = i * config.CELL_PIXELS

            # Horizontal line
            pygame.draw.line(self.screen, color,
                             (config.GRID_X, config.GRID_Y + offset),
                             (config.GRID_X + config.GRID_PIXELS, config.GRID_Y + offset), thickness)
            # Vertical line
            pygame.draw.line(self.screen, color,
                             (config.GRID_X + offset, config.GRID_Y),
                             (config.GRID_X + offset, config.GRID_Y + config.GRID_PIXELS), thickness)

    def draw_controls(self, snapshot):
        x = config.GRID_X
        width = config.GRID_PIXELS
        y = config.GRID_Y + config.GRID_PIXELS + 20
        white = (255, 255, 255)

        # Action buttons
        third = (width - 16) // 3
        memo_color = self.colors['button_active'] if snapshot.memo_mode else self.colors['button_disabled']
        memo_label = f"Memo {'ON' if snapshot.memo_mode else 'OFF'}"
        self.draw_button(memo_label, (x, y, third, 44), memo_color, white,
                         lambda: self.session.toggle_memo_mode())
        self.draw_button("Erase", (x + third + 8, y, third, 44), self.colors['button_disabled'],
                         self.colors['text'], lambda: self.session.erase())
        if self.new_game_guard.armed:
            self.draw_button("Sure?", (x + 2 * (third + 8), y, third, 44),
                             self.colors['wrong'], white, self.request_new_game)
        else:
            self.draw_button("New Game", (x + 2 * (third + 8), y, third, 44),
                             self.colors['button_disabled'], self.colors['text'],
                             self.request_new_game)

        # Number pad, exhausted digits are disabled
        y += 60
        pad = (width - 4 * 8) // 5
        for index, digit in enumerate(DIGITS):
            bx = x + (index % 5) * (pad + 8)
            by = y + (index // 5) * 58
            enabled = digit not in snapshot.exhausted_digits
            color = self.colors['button'] if enabled else self.colors['button_disabled']
            self.draw_button(str(digit), (bx, by, pad, 50), color, white,
                             lambda d=digit: self.session.place_digit(d), enabled)

        # Difficulty selector
        y += 2 * 58 + 10
        for index, (key, label) in enumerate(DIFFICULTY_LABELS):
            active = key == snapshot.difficulty
            color = self.colors['button_active'] if active else self.colors['button_disabled']
            text_color = white if active else self.colors['text']
            self.draw_button(label, (x + index * (third + 8), y, third, 36), color, text_color,
                             lambda k=key: self.start_new_game(k))

    def draw_victory(self):
        overlay = pygame.Surface((config.GRID_PIXELS, config.GRID_PIXELS))
        overlay.set_alpha(215)
        overlay.fill(self.colors['overlay'])
        self.screen.blit(overlay, (config.GRID_X, config.GRID_Y))

        center_x = config.GRID_X + config.GRID_PIXELS // 2
        center_y = config.GRID_Y + config.GRID_PIXELS // 2
        title = self.font_title.render("Cleared!", True, self.colors['trophy'])
        self.screen.blit(title, title.get_rect(center=(center_x, center_y - 60)))
        message = self.font_small.render("Every cell is correct.", True, self.colors['text_muted'])
        self.screen.blit(message, message.get_rect(center=(center_x, center_y - 20)))
        self.draw_button("Next Game", (center_x - 90, center_y + 20, 180, 48),
                         self.colors['button'], (255, 255, 255), self.request_new_game)

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------
    def handle_click(self, pos):
        # Buttons are registered last-drawn-on-top, so search from the end
        for _, rect, action in reversed(self.click_targets):
            if rect.collidepoint(pos):
                if action != self.request_new_game:
                    self.new_game_guard.cancel()
                action()
                return

        self.new_game_guard.cancel()

        x, y = pos
        if (config.GRID_X <= x < config.GRID_X + config.GRID_PIXELS and
                config.GRID_Y <= y < config.GRID_Y + config.GRID_PIXELS):
            col = (x - config.GRID_X) // config.CELL_PIXELS
            row = (y - config.GRID_Y) // config.CELL_PIXELS
            self.session.select_cell(row, col)

    def run(self):
        """Main game loop."""
        clock = pygame.time.Clock()
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(event.pos)
                elif event.type == pygame.KEYDOWN:
                    self.new_game_guard.cancel()
                    self.keyboard.handle_event(event)

            self.draw(self.session.snapshot())
            pygame.display.flip()
            clock.tick(config.FPS)

        pygame.quit()
