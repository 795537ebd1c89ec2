#!/usr/bin/env python3
"""
game_client.py

Pygame front end: input mapping, rendering and the frame scheduler loop.
The simulation itself lives in game_engine; this module never changes game state
except through GameEngine.start(), tick() and force_pause().
"""

import sys
from typing import Tuple

import pygame

from .constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, FPS, GROUND_LINE_Y, DB_FILE, DEBUG_MODE
)
from .game_engine import GameEngine
from .input_state import InputState, JUMP, DUCK
from .score_db import HighScoreStore

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)
DUCK_KEYS = (pygame.K_DOWN,)

# -------- Palette --------
DAY_SKY = (247, 247, 247)
NIGHT_SKY = (32, 33, 36)
DAY_TEXT = (83, 83, 83)
NIGHT_TEXT = (230, 230, 230)
ROAD = (40, 40, 40)
CENTER_LINE = (250, 250, 250)
BIKE_BODY = (200, 40, 40)
BIKE_RIDER = (30, 60, 160)
WHEEL = (20, 20, 20)
CACTUS = (60, 140, 60)
TRUCK = (210, 150, 40)
BIRD = (120, 90, 70)

ROAD_WIDTH = 40
DASH_SPACING = 40
DASH_LENGTH = 20
CENTER_LINE_WIDTH = 3


class GameClient:
    def __init__(self, db_file: str = DB_FILE):
        pygame.init()
        self.window = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Moto Runner")
        # Everything is drawn at canvas resolution and scaled to the window.
        self.canvas = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))

        self.store = HighScoreStore(db_file)
        self.engine = GameEngine(store=self.store)
        self.inputs = InputState()

        self.clock = pygame.time.Clock()
        self.touch_device = False
        self.debug = DEBUG_MODE

        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 28)
        print(f"High score loaded: {self.engine.high_score}")

    def run(self):
        """The main client loop: input, tick, render, wait for the next frame."""
        running = True
        while running:
            self.clock.tick(FPS)

            for event in pygame.event.get():
                if not self._handle_event(event):
                    running = False

            if self.inputs.consume_start() and not self.engine.is_playing():
                if self.engine.start():
                    # The press that started the game is not also a jump.
                    self.inputs.consume()
                    print("Session started.")

            hit = self.engine.tick(self.inputs.consume())
            if hit is not None:
                print(f"Game over. Score: {self.engine.final_score} "
                      f"(high score {self.engine.high_score})")

            self.engine.advance_effects()
            self._draw(self.engine.to_render_state())

        self.store.close()
        pygame.quit()

    # -------- Input --------

    def _to_canvas_y(self, window_y: float) -> float:
        return window_y * CANVAS_HEIGHT / max(self.window.get_height(), 1)

    def _handle_event(self, event) -> bool:
        """Maps one pygame event onto InputState. Returns False to quit."""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_F3:
                self.debug = not self.debug
            elif event.key in JUMP_KEYS:
                self.inputs.key_down(JUMP)
            elif event.key in DUCK_KEYS:
                self.inputs.key_down(DUCK)
        elif event.type == pygame.KEYUP:
            if event.key in DUCK_KEYS:
                self.inputs.key_up(DUCK)

        # Touch arrives as FINGER* events; pygame also emits emulated mouse
        # events for them, flagged with touch=True, which are skipped here.
        elif event.type == pygame.FINGERDOWN:
            self.touch_device = True
            self.inputs.pointer_down(event.y * CANVAS_HEIGHT, CANVAS_HEIGHT)
        elif event.type == pygame.FINGERMOTION:
            self.inputs.pointer_move(event.y * CANVAS_HEIGHT)
        elif event.type == pygame.FINGERUP:
            self.inputs.pointer_up()
        elif event.type == pygame.MOUSEBUTTONDOWN and not getattr(event, "touch", False):
            if event.button == 1:
                self.inputs.pointer_down(self._to_canvas_y(event.pos[1]), CANVAS_HEIGHT)
        elif event.type == pygame.MOUSEMOTION and not getattr(event, "touch", False):
            if event.buttons[0]:
                self.inputs.pointer_move(self._to_canvas_y(event.pos[1]))
        elif event.type == pygame.MOUSEBUTTONUP and not getattr(event, "touch", False):
            if event.button == 1:
                self.inputs.pointer_up()

        elif event.type == pygame.VIDEORESIZE:
            self.window = pygame.display.get_surface()
            self._check_orientation(event.w, event.h)

        return True

    def _check_orientation(self, width: int, height: int):
        """Portrait on a touch device pauses the game until it is restarted."""
        if self.touch_device and height > width and self.engine.force_pause():
            self.inputs.reset()
            print("Paused: rotate to landscape to play.")

    # -------- Rendering --------

    def _draw(self, state: dict):
        night = state["night"]
        text_color = NIGHT_TEXT if night else DAY_TEXT
        canvas = self.canvas
        canvas.fill(NIGHT_SKY if night else DAY_SKY)

        self._draw_ground(state)

        if state["state"] == "waiting":
            self._draw_vehicle(state)
            self._blit_centered("Press SPACE or tap to start", self.large_font,
                                text_color, CANVAS_HEIGHT // 2 - 50)
        else:
            self._draw_particles(state)
            self._draw_vehicle(state)
            self._draw_obstacles(state)
            self._draw_score(state, text_color)
            if self.debug:
                self._draw_hitboxes(state)
            if state["state"] == "game_over":
                self._blit_centered(f"Score: {state['final_score']}", self.large_font,
                                    text_color, CANVAS_HEIGHT // 2 - 60)
                self._blit_centered(f"High Score: {state['high_score']}", self.font,
                                    text_color, CANVAS_HEIGHT // 2 - 20)
                self._blit_centered("Press SPACE or tap to restart", self.font,
                                    text_color, CANVAS_HEIGHT // 2 + 10)

        pygame.transform.scale(canvas, self.window.get_size(), self.window)
        pygame.display.flip()

    def _draw_ground(self, state: dict):
        canvas = self.canvas
        pygame.draw.line(canvas, ROAD, (0, GROUND_LINE_Y), (CANVAS_WIDTH, GROUND_LINE_Y), ROAD_WIDTH)
        offset = (state["frame"] * state["speed"]) % DASH_SPACING
        x = -offset
        while x < CANVAS_WIDTH:
            pygame.draw.line(canvas, CENTER_LINE, (x, GROUND_LINE_Y),
                             (x + DASH_LENGTH, GROUND_LINE_Y), CENTER_LINE_WIDTH)
            x += DASH_SPACING

    def _draw_vehicle(self, state: dict):
        v = state["vehicle"]
        w, h = int(v["width"]), int(v["height"])
        sprite = pygame.Surface((w, h), pygame.SRCALPHA)
        wheel_r = h // 5
        pygame.draw.rect(sprite, BIKE_BODY, (wheel_r, h // 3, w - 2 * wheel_r, h // 3))
        if v["pose"] == "duck":
            pygame.draw.rect(sprite, BIKE_RIDER, (w // 3, 0, w // 2, h // 3))
        else:
            pygame.draw.rect(sprite, BIKE_RIDER, (w // 3, 0, w // 5, h // 3))
        pygame.draw.circle(sprite, WHEEL, (wheel_r + 2, h - wheel_r), wheel_r)
        pygame.draw.circle(sprite, WHEEL, (w - wheel_r - 2, h - wheel_r), wheel_r)

        flash = state["collision_flash"]
        if flash > 0 and flash % 2 == 0:
            sprite.set_alpha(77)
        self.canvas.blit(sprite, (int(v["x"]), int(v["y"])))

    def _draw_obstacles(self, state: dict):
        canvas = self.canvas
        for o in state["ground"]:
            rect = pygame.Rect(int(o["x"]), int(o["y"]), int(o["width"]), int(o["height"]))
            if o["kind"] == "pickup_truck":
                pygame.draw.rect(canvas, TRUCK, rect)
                cab_x = rect.left if o["flip_h"] else rect.right - rect.width // 3
                pygame.draw.rect(canvas, ROAD, (cab_x, rect.top, rect.width // 3, rect.height // 2), 2)
            else:
                stem = rect.inflate(-rect.width // 2, 0)
                pygame.draw.rect(canvas, CACTUS, stem)
                arm_y = rect.top + rect.height // 3
                arm_x = rect.left if o["flip_h"] else rect.centerx
                pygame.draw.rect(canvas, CACTUS, (arm_x, arm_y, rect.width // 2, 4))
        for o in state["flying"]:
            body = pygame.Rect(int(o["x"]), int(o["y"]), int(o["width"]), int(o["height"]))
            pygame.draw.ellipse(canvas, BIRD, body.inflate(0, -body.height // 2))
            wing_y = body.top if o["wing_frame"] == 0 else body.centery
            pygame.draw.polygon(canvas, BIRD, [
                (body.centerx - 8, body.centery),
                (body.centerx + 8, body.centery),
                (body.centerx, wing_y if o["wing_frame"] == 0 else body.bottom),
            ])

    def _draw_particles(self, state: dict):
        for p in state["particles"]:
            dot = pygame.Surface((p["size"], p["size"]))
            dot.fill(p["color"])
            dot.set_alpha(int(255 * p["alpha"]))
            self.canvas.blit(dot, (int(p["x"]), int(p["y"])))

    def _draw_score(self, state: dict, color: Tuple[int, int, int]):
        score = self.font.render(f"Score: {state['score']}", True, color)
        high = self.font.render(f"HI: {state['high_score']}", True, color)
        self.canvas.blit(score, (CANVAS_WIDTH - 20 - score.get_width(), 20))
        self.canvas.blit(high, (CANVAS_WIDTH - 20 - high.get_width(), 50))
        if self.debug:
            speed = self.font.render(f"Speed: {state['speed']:.1f}", True, color)
            self.canvas.blit(speed, (20, 20))

    def _draw_hitboxes(self, state: dict):
        canvas = self.canvas
        pygame.draw.rect(canvas, (255, 0, 0), pygame.Rect(*state["vehicle"]["hitbox"]), 1)
        for o in state["ground"] + state["flying"]:
            pygame.draw.rect(canvas, (0, 200, 0), (o["x"], o["y"], o["width"], o["height"]), 1)

    def _blit_centered(self, text: str, font, color, y: int):
        surf = font.render(text, True, color)
        self.canvas.blit(surf, (CANVAS_WIDTH // 2 - surf.get_width() // 2, y))


def main():
    db_file = sys.argv[1] if len(sys.argv) > 1 else DB_FILE
    client = GameClient(db_file)
    client.run()


if __name__ == "__main__":
    main()
