"""
renderer.py: Draws a FrameSnapshot with pygame. Never mutates game state.

Everything is drawn on a virtual surface the size of the world and then
scaled to the window.
"""

from typing import Dict, Tuple

import pygame

from .config import GameConfig
from .data_models import FrameSnapshot, GameMode

Color = Tuple[int, int, int]

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
SKY_TOP = (176, 224, 230)
SKY_BOTTOM = (224, 246, 255)
TILE_LINE = (211, 211, 211)
GROUND_TOP = (210, 105, 30)
GROUND_BOTTOM = (139, 69, 19)
MAT_DOT = (160, 82, 45)
PIPE_BODY = (143, 188, 143)
PIPE_SHINE = (168, 213, 168)
PIPE_CAP = (107, 142, 107)
TOILET_BOWL = (255, 255, 255)
TOILET_TANK = (245, 245, 245)
TOILET_SEAT = (135, 206, 235)
TOILET_EDGE = (204, 204, 204)
BUTTON = (76, 175, 80)
BUTTON_EDGE = (46, 125, 50)
SMALL_BUTTON = (70, 130, 180)
SMALL_BUTTON_EDGE = (44, 88, 128)
TITLE = (46, 125, 50)
GAME_OVER_RED = (255, 107, 107)
GOLD = (255, 215, 0)
TEXT_DARK = (51, 51, 51)
TEXT_GREY = (102, 102, 102)

TILE_SIZE = 40


def button_layout(width: int, height: int) -> Dict[str, pygame.Rect]:
    """Clickable areas in world coordinates, shared with the input handler."""
    cx = width // 2
    return {
        "play": pygame.Rect(cx - 80, 380, 160, 50),
        "restart": pygame.Rect(cx - 80, 400, 160, 50),
        "help_start": pygame.Rect(cx - 25, 450, 50, 40),
        "help_game_over": pygame.Rect(cx - 25, 465, 50, 35),
        "pause": pygame.Rect(width - 60, 10, 50, 35),
        "close_help": pygame.Rect(cx - 70, height - 90, 140, 45),
    }


def _lerp(a: Color, b: Color, t: float) -> Color:
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


class Renderer:

    def __init__(self, config: GameConfig, window: pygame.Surface):
        self.config = config
        self.window = window
        self.width = config.world_width
        self.height = config.world_height
        self.floor_y = int(config.floor_y)
        self.surface = pygame.Surface((self.width, self.height))
        self.buttons = button_layout(self.width, self.height)

        self.fonts = {size: pygame.font.Font(None, size) for size in (18, 20, 24, 28, 32, 40, 56, 64)}
        self.background = self._build_background()

    def _build_background(self) -> pygame.Surface:
        bg = pygame.Surface((self.width, self.height))
        for y in range(self.height):
            pygame.draw.line(bg, _lerp(SKY_TOP, SKY_BOTTOM, y / self.height), (0, y), (self.width, y))
        for x in range(0, self.width, TILE_SIZE):
            for y in range(0, self.floor_y, TILE_SIZE):
                pygame.draw.rect(bg, TILE_LINE, (x, y, TILE_SIZE, TILE_SIZE), 1)

        ground_h = self.height - self.floor_y
        for y in range(ground_h):
            pygame.draw.line(bg, _lerp(GROUND_TOP, GROUND_BOTTOM, y / max(ground_h, 1)),
                             (0, self.floor_y + y), (self.width, self.floor_y + y))
        for x in range(0, self.width, 15):
            for y in range(0, ground_h, 15):
                pygame.draw.rect(bg, MAT_DOT, (x, self.floor_y + y, 8, 8))
        return bg

    # ---------- Helpers ----------

    def _text(self, text: str, size: int, color: Color, center: Tuple[int, int]):
        surf = self.fonts[size].render(text, True, color)
        self.surface.blit(surf, surf.get_rect(center=center))

    def _overlay(self, color: Color, alpha: int):
        veil = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        veil.fill((*color, alpha))
        self.surface.blit(veil, (0, 0))

    def _button(self, text: str, rect: pygame.Rect, small: bool = False):
        if small:
            pygame.draw.rect(self.surface, SMALL_BUTTON, rect)
            pygame.draw.rect(self.surface, SMALL_BUTTON_EDGE, rect, 2)
            self._text(text, 20, WHITE, rect.center)
        else:
            pygame.draw.rect(self.surface, BUTTON, rect)
            pygame.draw.rect(self.surface, BUTTON_EDGE, rect, 3)
            self._text(text, 32, WHITE, rect.center)

    # ---------- World ----------

    def _draw_pipes(self, snap: FrameSnapshot):
        w = self.config.pipe_width
        for pipe in snap.pipes:
            x = int(pipe.x)
            top = int(pipe.top_height)
            bottom = int(pipe.bottom_y)
            bottom_h = self.floor_y - bottom

            pygame.draw.rect(self.surface, PIPE_BODY, (x, 0, w, top))
            pygame.draw.rect(self.surface, PIPE_SHINE, (x + 5, 0, 15, max(top - 20, 0)))
            pygame.draw.rect(self.surface, PIPE_CAP, (x - 3, top - 20, w + 6, 20))

            pygame.draw.rect(self.surface, PIPE_BODY, (x, bottom, w, bottom_h))
            pygame.draw.rect(self.surface, PIPE_SHINE, (x + 5, bottom + 20, 15, max(bottom_h - 20, 0)))
            pygame.draw.rect(self.surface, PIPE_CAP, (x - 3, bottom, w + 6, 20))

    def _draw_toilet(self, snap: FrameSnapshot):
        tx, ty = int(snap.player.x), int(snap.player.y)
        bowl = pygame.Rect(0, 0, 36, 24)
        bowl.center = (tx + 20, ty + 30)
        pygame.draw.ellipse(self.surface, TOILET_BOWL, bowl)
        pygame.draw.ellipse(self.surface, TOILET_EDGE, bowl, 2)

        tank = pygame.Rect(tx + 8, ty + 5, 24, 18)
        pygame.draw.rect(self.surface, TOILET_TANK, tank)
        pygame.draw.rect(self.surface, TOILET_EDGE, tank, 2)

        seat = pygame.Rect(0, 0, 32, 20)
        seat.center = (tx + 20, ty + 28)
        pygame.draw.ellipse(self.surface, TOILET_SEAT, seat)

        pygame.draw.line(self.surface, (170, 170, 170), (tx + 30, ty + 12), (tx + 35, ty + 12), 2)

    # ---------- HUD and screens ----------

    def _draw_score(self, snap: FrameSnapshot):
        if snap.mode is GameMode.START:
            return
        cx = self.width // 2
        for dx, dy in ((-2, 0), (2, 0), (0, -2), (0, 2)):
            self._text(str(snap.score), 64, WHITE, (cx + dx, 50 + dy))
        self._text(str(snap.score), 64, BLACK, (cx, 50))

        level = self.fonts[24].render(f"Level {snap.level}", True, TEXT_DARK)
        self.surface.blit(level, (10, 12))
        speed = self.fonts[18].render(f"Speed: {snap.speed_percent}%", True, TEXT_GREY)
        self.surface.blit(speed, (10, 38))

    def _draw_hud(self, snap: FrameSnapshot):
        if snap.mode not in (GameMode.PLAYING, GameMode.PAUSED):
            return
        self._button("II", self.buttons["pause"], small=True)
        mute = self.fonts[18].render("MUTED" if snap.muted else "SOUND", True, TEXT_DARK)
        self.surface.blit(mute, mute.get_rect(midtop=(self.width - 35, 52)))

    def _draw_start(self, snap: FrameSnapshot):
        cx = self.width // 2
        self._overlay(WHITE, 230)
        self._text("Flying Toilet", 64, TITLE, (cx, 110))
        self._text("Tap/Space to flap", 28, TEXT_DARK, (cx, 270))
        self._text("Avoid the pipes", 28, TEXT_DARK, (cx, 300))
        self._text("Press M to mute", 28, TEXT_DARK, (cx, 330))
        self._button("PLAY", self.buttons["play"])
        self._button("?", self.buttons["help_start"], small=True)
        self._text("MUTED" if snap.muted else "SOUND ON", 24, TEXT_GREY, (cx, 510))
        if snap.high_score > 0:
            self._text(f"Best Score: {snap.high_score}", 28, (136, 136, 136), (cx, 545))
            self._text(f"Best Level: {snap.best_level}", 24, (136, 136, 136), (cx, 570))

    def _draw_game_over(self, snap: FrameSnapshot):
        cx = self.width // 2
        self._overlay(BLACK, 180)
        self._text("GAME OVER", 64, GAME_OVER_RED, (cx, 130))
        self._text(f"Score: {snap.score}", 40, WHITE, (cx, 195))
        self._text(f"Level Reached: {snap.level}", 28, WHITE, (cx, 232))
        self._text(f"Pipes Passed: {snap.pipes_passed}", 28, WHITE, (cx, 262))
        self._text("BEST STATS", 32, GOLD, (cx, 305))
        self._text(f"High Score: {snap.high_score}", 28, WHITE, (cx, 337))
        self._text(f"Best Level: {snap.best_level}", 28, WHITE, (cx, 362))
        self._button("RESTART", self.buttons["restart"])
        self._button("?", self.buttons["help_game_over"], small=True)
        self._text("UNMUTE (M)" if snap.muted else "MUTE (M)", 20, (170, 170, 170), (cx, 525))

    def _draw_paused(self):
        cx, cy = self.width // 2, self.height // 2
        self._overlay(BLACK, 150)
        self._text("PAUSED", 64, WHITE, (cx, cy - 20))
        self._text("Press P to Resume", 32, WHITE, (cx, cy + 40))

    def _draw_help(self, snap: FrameSnapshot):
        cx = self.width // 2
        self._overlay(BLACK, 215)
        pygame.draw.rect(self.surface, WHITE, (30, 40, self.width - 60, self.height - 80))
        self._text("HOW TO PLAY", 40, TITLE, (cx, 85))

        lines = [
            (True, "OBJECTIVE:"),
            (False, "Keep the toilet flying through pipes"),
            (False, "without crashing. Each pipe passed scores a point."),
            (True, "CONTROLS:"),
            (False, "SPACE / UP / CLICK - Flap"),
            (False, "P - Pause/Resume    M - Mute/Unmute"),
            (False, "R - Restart (after game over)    ESC - Close help"),
            (True, "PROGRESSION:"),
            (False, f"Every {self.config.pipes_per_level} pipes = Level Up!"),
            (False, "Speed increases and gaps get tighter"),
        ]
        y = 130
        for heading, line in lines:
            if heading:
                y += 8
            surf = self.fonts[24 if heading else 20].render(line, True, TEXT_DARK)
            self.surface.blit(surf, (50 if heading else 60, y))
            y += 26

        self._button("CLOSE", self.buttons["close_help"])
        self._text("or press ESC", 18, TEXT_GREY, (cx, self.height - 30))

    # ---------- Frame ----------

    def draw(self, snap: FrameSnapshot):
        self.surface.blit(self.background, (0, 0))
        self._draw_pipes(snap)
        self._draw_toilet(snap)
        self._draw_score(snap)
        self._draw_hud(snap)

        if snap.mode is GameMode.START:
            self._draw_start(snap)
        elif snap.mode is GameMode.GAME_OVER:
            self._draw_game_over(snap)
        elif snap.mode is GameMode.PAUSED:
            self._draw_paused()
        if snap.showing_help:
            self._draw_help(snap)

        pygame.transform.smoothscale(self.surface, self.window.get_size(), self.window)
        pygame.display.flip()
