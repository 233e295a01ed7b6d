"""
Desktop window for SpeedRays using pygame.

Keyboard Mapping:
    ENTER: Start a run (home screen)
    M: Toggle race / park (home screen)
    LEFT/RIGHT/UP/DOWN: Steer, accelerate, brake
    P: Pause / resume
    R: Restart (game over screen)
    H: Back to home (game over screen, or quit a run)
    S: Mute / unmute
    ESC: Exit
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import pygame

from speedrays.audio.engine import AudioEngine
from speedrays.config.settings import Settings
from speedrays.core.events import Event, EventBus, EventType
from speedrays.core.session import GameMode, PlayerProfile
from speedrays.core.state import Screen, ScreenFlow
from speedrays.engine.loop import ManualFramePump, RunController
from speedrays.graphics.renderer import GameRenderer
from speedrays.simulator.input import KeyboardInput
from speedrays.utils.score_log import ScoreLog, format_highscores

logger = logging.getLogger(__name__)

BG = (14, 17, 28)
HUD_BG = (22, 27, 44)
TEXT = (220, 224, 240)
ACCENT = (255, 209, 102)
TOAST_BG = (40, 48, 78)


@dataclass
class Toast:
    title: str
    detail: str
    remaining_ms: float


class SpeedRaysWindow:
    """Hosts the run controller inside a pygame frame loop."""

    def __init__(
        self,
        settings: Settings,
        profile: PlayerProfile,
        mode: GameMode = GameMode.RACE,
        audio: Optional[AudioEngine] = None,
        scores: Optional[ScoreLog] = None,
    ) -> None:
        self.settings = settings
        self.profile = profile
        self.mode = mode
        self.audio = audio
        self.scores = scores or ScoreLog(settings.scores_path)

        self.event_bus = EventBus()
        self.flow = ScreenFlow()
        self.input = KeyboardInput()
        self.renderer = GameRenderer(settings.game)
        self.pump = ManualFramePump()
        self.controller = RunController(
            self.pump,
            self.input.sample,
            settings.game,
            render=self.renderer,
            audio=audio,
            scores=self.scores,
            event_bus=self.event_bus,
            flow=self.flow,
            seed=settings.seed,
        )

        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None
        self._running = False
        self._toasts: list[Toast] = []

        self.event_bus.subscribe(EventType.LEVEL_COMPLETE, self._on_level_complete)
        logger.info("SpeedRaysWindow created")

    def _on_level_complete(self, event: Event) -> None:
        self._toasts.append(Toast(
            "Level Complete!",
            event.data.get("description", ""),
            float(self.settings.display.toast_ms),
        ))

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.settings.display.title)

        game = self.settings.game
        size = (game.view_width, game.view_height + self.settings.display.hud_height)
        self._screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 28)
        self._small_font = pygame.font.SysFont(None, 20)
        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
                continue
            if event.type != pygame.KEYDOWN:
                self.input.handle_event(event)
                continue

            if event.key == pygame.K_ESCAPE:
                self.stop()
            elif event.key == pygame.K_s and self.audio:
                self.audio.toggle_mute()
            elif self.flow.screen is Screen.HOME:
                self._handle_home_key(event.key)
            elif self.flow.screen is Screen.GAME_OVER:
                self._handle_game_over_key(event.key)
            elif event.key == pygame.K_h:
                self._go_home()
            else:
                self.input.handle_event(event)

    def _handle_home_key(self, key: int) -> None:
        if key == pygame.K_m:
            self.mode = GameMode.PARK if self.mode is GameMode.RACE else GameMode.RACE
            logger.info(f"Mode selected: {self.mode.value}")
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.input.reset()
            self._toasts.clear()
            self.controller.start(self.profile, self.mode)

    def _handle_game_over_key(self, key: int) -> None:
        if key == pygame.K_r:
            self.input.reset()
            self._toasts.clear()
            self.controller.restart()
        elif key == pygame.K_h:
            self._go_home()

    def _go_home(self) -> None:
        self.input.reset()
        self._toasts.clear()
        self.controller.go_home()

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True
        logger.info("Window started")

        while self._running:
            self._handle_events()
            self.pump.pump()

            delta_ms = self._clock.get_time() if self._clock else 0
            self._update_toasts(delta_ms)
            self._render()

            if self._clock:
                self._clock.tick(self.settings.display.fps)

            # Yield to other tasks between frames
            await asyncio.sleep(0)

        self._cleanup()

    def _update_toasts(self, delta_ms: float) -> None:
        if self.input.paused:
            return
        for toast in self._toasts:
            toast.remaining_ms -= delta_ms
        self._toasts = [t for t in self._toasts if t.remaining_ms > 0]

    # ===== DRAWING =====

    def _text(self, text: str, pos: tuple[int, int], color=TEXT, small: bool = False, center: bool = False) -> None:
        font = self._small_font if small else self._font
        if not font or not self._screen:
            return
        surface = font.render(text, True, color)
        rect = surface.get_rect()
        if center:
            rect.midtop = pos
        else:
            rect.topleft = pos
        self._screen.blit(surface, rect)

    def _render(self) -> None:
        if not self._screen:
            return
        self._screen.fill(BG)

        screen = self.flow.screen
        if screen is Screen.HOME:
            self._render_home()
        else:
            self._render_game()
            if screen is Screen.GAME_OVER:
                self._render_game_over()

        pygame.display.flip()

    def _render_home(self) -> None:
        cx = self.settings.game.view_width // 2
        self._text("SPEEDRAYS", (cx, 60), ACCENT, center=True)
        self._text(self.profile.describe(), (cx, 110), center=True)
        self._text(f"Mode: {self.mode.value.upper()}  (M to switch)", (cx, 150), small=True, center=True)
        self._text("ENTER to start", (cx, 180), small=True, center=True)

        self._text("High scores", (cx, 240), ACCENT, center=True)
        for i, line in enumerate(format_highscores(self.scores.top())):
            self._text(line, (30, 280 + i * 24), small=True)

    def _render_game(self) -> None:
        simulation = self.controller.simulation
        if simulation is None:
            return
        session = simulation.session
        hud_h = self.settings.display.hud_height

        frame = pygame.surfarray.make_surface(self.renderer.buffer.swapaxes(0, 1))
        self._screen.blit(frame, (0, hud_h))

        pygame.draw.rect(self._screen, HUD_BG, pygame.Rect(0, 0, self.settings.game.view_width, hud_h))
        self._text(f"{session.profile.describe()}  {' '.join(session.badges)}", (10, 8), small=True)
        self._text(
            f"Score {session.score}   Speed {session.speed:.0f}   "
            f"Time {int(session.elapsed)}   Level {session.level}",
            (10, 34),
            small=True,
        )

        for i, toast in enumerate(self._toasts):
            box = pygame.Rect(20, hud_h + 16 + i * 56, self.settings.game.view_width - 40, 48)
            pygame.draw.rect(self._screen, TOAST_BG, box, border_radius=8)
            self._text(toast.title, (box.x + 10, box.y + 4), ACCENT, small=True)
            self._text(toast.detail, (box.x + 10, box.y + 24), small=True)

        if self.input.paused and session.running:
            self._text("PAUSED", (self.settings.game.view_width // 2, hud_h + 300), ACCENT, center=True)

    def _render_game_over(self) -> None:
        simulation = self.controller.simulation
        if simulation is None:
            return
        session = simulation.session
        cx = self.settings.game.view_width // 2
        y = self.settings.display.hud_height + 260

        overlay = pygame.Surface(self._screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self._screen.blit(overlay, (0, 0))

        title = "PARKED!" if simulation.outcome and simulation.outcome.success else "CRASH"
        self._text(title, (cx, y), ACCENT, center=True)
        self._text(f"Final score: {session.score}", (cx, y + 40), center=True)
        if session.badges:
            self._text(" ".join(session.badges), (cx, y + 74), small=True, center=True)
        self._text("R restart   H home   ESC quit", (cx, y + 110), small=True, center=True)

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        self.controller.cancel()
        if self.audio:
            self.audio.cleanup()
        pygame.quit()
        logger.info("Window stopped")

    def stop(self) -> None:
        """Stop the window loop."""
        self._running = False
